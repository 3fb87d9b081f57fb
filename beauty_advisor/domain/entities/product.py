from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Product:
    id: int
    name: str
    brand: str
    category: str
    description: str = ""
    image: str = ""
