from __future__ import annotations

from dataclasses import dataclass

USER = "user"
ASSISTANT = "assistant"


@dataclass(frozen=True)
class Turn:
    role: str  # "user" | "assistant"
    content: str

    def as_message(self) -> dict[str, str]:
        return {"role": self.role, "content": self.content}
