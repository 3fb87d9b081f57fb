from __future__ import annotations

from abc import ABC, abstractmethod

from beauty_advisor.domain.entities.product import Product


class CatalogSourcePort(ABC):
    @abstractmethod
    def load(self) -> list[Product]:
        """Read the full product list. Raises CatalogUnavailable on read or parse failure."""
        raise NotImplementedError
