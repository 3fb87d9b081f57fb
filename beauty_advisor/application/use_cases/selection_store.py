from __future__ import annotations

import json
import logging
import threading
from typing import Callable, Iterable

from beauty_advisor.application.exceptions import PersistenceError
from beauty_advisor.application.ports.storage import KeyValueStoragePort
from beauty_advisor.application.utils.product_codec import product_from_dict, product_to_dict
from beauty_advisor.domain.entities.product import Product

SELECTED_PRODUCTS_KEY = "loreal-selected-products"

SelectionObserver = Callable[[list[Product]], None]


class SelectionStore:
    """
    Ordered, id-unique set of selected products backed by key-value storage.

    The in-memory list is authoritative for the session. Every mutation is
    written through to storage on a best-effort basis and then announced to
    observers with a snapshot of the new selection.
    """

    def __init__(self, storage: KeyValueStoragePort, key: str = SELECTED_PRODUCTS_KEY) -> None:
        self._storage = storage
        self._key = key
        self._products: list[Product] = []
        self._observers: list[SelectionObserver] = []
        self._lock = threading.RLock()
        self._logger = logging.getLogger(__name__)

    @property
    def products(self) -> list[Product]:
        with self._lock:
            return list(self._products)

    def __len__(self) -> int:
        return len(self._products)

    def contains(self, product_id: int) -> bool:
        with self._lock:
            return any(p.id == product_id for p in self._products)

    def subscribe(self, observer: SelectionObserver) -> None:
        self._observers.append(observer)

    def toggle(self, product: Product) -> bool:
        """Remove the product if selected, append it otherwise. Returns True if now selected."""
        with self._lock:
            index = self._index_of(product.id)
            if index is None:
                self._products.append(product)
                selected = True
            else:
                del self._products[index]
                selected = False
            self.persist()
            snapshot = list(self._products)
        self._logger.info(
            "Selection toggled",
            extra={"product_id": product.id, "selected_count": len(snapshot), "reason": "added" if selected else "removed"},
        )
        self._notify(snapshot)
        return selected

    def clear(self) -> None:
        with self._lock:
            self._products = []
            self.persist()
        self._notify([])

    def restore(self) -> list[Product]:
        """Load the persisted selection. Any read or decode problem leaves an empty selection."""
        with self._lock:
            self._products = self._read_persisted()
            snapshot = list(self._products)
        self._logger.info("Selection restored", extra={"selected_count": len(snapshot)})
        self._notify(snapshot)
        return snapshot

    def reconcile(self, catalog: Iterable[Product]) -> bool:
        """Drop members whose id is not in `catalog`. Persists only if something was removed."""
        known_ids = {p.id for p in catalog}
        with self._lock:
            if not self._products:
                return False
            valid = [p for p in self._products if p.id in known_ids]
            if len(valid) == len(self._products):
                return False
            removed = len(self._products) - len(valid)
            self._products = valid
            self.persist()
            snapshot = list(self._products)
        self._logger.info(
            "Cleaned up invalid product selections",
            extra={"selected_count": len(snapshot), "reason": f"{removed} not in catalog"},
        )
        self._notify(snapshot)
        return True

    def persist(self) -> None:
        """Write the full ordered selection to storage. Failures are logged, never raised."""
        with self._lock:
            payload = json.dumps([product_to_dict(p) for p in self._products], ensure_ascii=False)
            try:
                self._storage.set(self._key, payload)
            except PersistenceError as e:
                self._logger.error("Error saving selected products", extra={"error": str(e)})

    def _read_persisted(self) -> list[Product]:
        try:
            raw = self._storage.get(self._key)
        except PersistenceError as e:
            self._logger.error("Error loading selected products", extra={"error": str(e)})
            return []
        if not raw:
            return []

        try:
            data = json.loads(raw)
        except (json.JSONDecodeError, TypeError) as e:
            self._logger.error("Error loading selected products", extra={"error": str(e)})
            return []
        if not isinstance(data, list):
            self._logger.error("Error loading selected products", extra={"error": "persisted value is not a list"})
            return []

        products: list[Product] = []
        seen: set[int] = set()
        for item in data:
            product = product_from_dict(item)
            if product is None or product.id in seen:
                continue
            seen.add(product.id)
            products.append(product)
        if len(products) != len(data):
            self._logger.warning(
                "Dropped malformed selection records",
                extra={"reason": f"{len(data) - len(products)} skipped"},
            )
        return products

    def _index_of(self, product_id: int) -> int | None:
        for index, selected in enumerate(self._products):
            if selected.id == product_id:
                return index
        return None

    def _notify(self, snapshot: list[Product]) -> None:
        for observer in list(self._observers):
            try:
                observer(list(snapshot))
            except Exception:
                self._logger.exception("Selection observer failed")
