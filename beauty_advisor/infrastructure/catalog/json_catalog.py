from __future__ import annotations

import json
import logging
from pathlib import Path

from beauty_advisor.application.exceptions import CatalogUnavailable
from beauty_advisor.application.ports.catalog_source import CatalogSourcePort
from beauty_advisor.application.utils.product_codec import products_from_list
from beauty_advisor.domain.entities.product import Product


class JsonFileCatalogSource(CatalogSourcePort):
    """Reads a `{"products": [...]}` document from disk on every load."""

    def __init__(self, path: str = "./data/products.json") -> None:
        self._path = Path(path)
        self._logger = logging.getLogger(__name__)

    def load(self) -> list[Product]:
        try:
            with open(self._path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            raise CatalogUnavailable(f"Cannot read catalog {self._path}: {e}") from e

        if not isinstance(data, dict):
            raise CatalogUnavailable("Catalog document must be a JSON object")
        try:
            products, skipped = products_from_list(data.get("products"))
        except TypeError as e:
            raise CatalogUnavailable(f"Catalog 'products' is invalid: {e}") from e

        if skipped:
            self._logger.warning("Skipped malformed catalog records", extra={"reason": f"{skipped} skipped"})
        return products
