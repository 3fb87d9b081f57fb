from __future__ import annotations

import logging

from beauty_advisor.application.ports.catalog_source import CatalogSourcePort
from beauty_advisor.domain.entities.product import Product


class ProductCatalog:
    """Holds the latest product list loaded for the session."""

    def __init__(self, source: CatalogSourcePort) -> None:
        self._source = source
        self._products: list[Product] = []
        self._logger = logging.getLogger(__name__)

    @property
    def products(self) -> list[Product]:
        return list(self._products)

    def load(self) -> list[Product]:
        """
        Read the full catalog and replace the cached copy.
        Raises CatalogUnavailable; the previous copy is kept in that case.
        """
        products = self._source.load()
        self._products = list(products)
        self._logger.info("Catalog loaded", extra={"product_count": len(self._products)})
        return list(self._products)

    def find(self, product_id: int) -> Product | None:
        for product in self._products:
            if product.id == product_id:
                return product
        return None

    def categories(self) -> list[str]:
        seen: list[str] = []
        for product in self._products:
            if product.category not in seen:
                seen.append(product.category)
        return seen

    def filter(self, category: str | None = None, search_term: str = "") -> list[Product]:
        products = self._products
        if category and category != "all":
            products = [p for p in products if p.category == category]

        term = (search_term or "").lower().strip()
        if term:
            products = [
                p
                for p in products
                if term in p.name.lower()
                or term in p.brand.lower()
                or term in p.description.lower()
                or term in p.category.lower()
            ]
        return list(products)
