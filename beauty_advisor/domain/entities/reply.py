from __future__ import annotations

from dataclasses import dataclass, field

from beauty_advisor.domain.entities.product import Product


@dataclass(frozen=True)
class ChatReply:
    text: str
    products: list[Product] = field(default_factory=list)
    used_web_search: bool = False
    failed: bool = False


@dataclass(frozen=True)
class RoutineResult:
    text: str
    generated: bool = False  # False when no LLM call produced a routine
    failed: bool = False
