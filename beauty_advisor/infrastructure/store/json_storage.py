from __future__ import annotations

import json
import logging
import threading
from pathlib import Path
from typing import Any

from beauty_advisor.application.exceptions import PersistenceError
from beauty_advisor.application.ports.storage import KeyValueStoragePort


class JsonFileKeyValueStorage(KeyValueStoragePort):
    """All keys live in one JSON object on disk, rewritten atomically on every set."""

    def __init__(self, path: str = "./data/storage.json") -> None:
        self._path = Path(path)
        self._lock = threading.Lock()
        self._logger = logging.getLogger(__name__)

    def get(self, key: str) -> str | None:
        with self._lock:
            value = self._load().get(key)
        if value is None:
            return None
        if not isinstance(value, str):
            # Stored by something else; hand it back in the encoded form readers expect.
            return json.dumps(value, ensure_ascii=False)
        return value

    def set(self, key: str, value: str) -> None:
        with self._lock:
            data = self._load_for_write()
            data[key] = value
            self._save(data)

    def delete(self, key: str) -> None:
        with self._lock:
            data = self._load_for_write()
            data.pop(key, None)
            self._save(data)

    def _load_for_write(self) -> dict[str, Any]:
        """Current document, or an empty one if the file is unreadable; the next save replaces it."""
        try:
            return self._load()
        except PersistenceError as e:
            self._logger.warning("Storage file unreadable, starting fresh", extra={"error": str(e)})
            return {}

    def _load(self) -> dict[str, Any]:
        if not self._path.exists():
            return {}
        try:
            with open(self._path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            raise PersistenceError(f"Cannot read storage file {self._path}: {e}") from e
        if not isinstance(data, dict):
            raise PersistenceError(f"Storage file {self._path} does not hold a JSON object")
        return data

    def _save(self, data: dict[str, Any]) -> None:
        temp_path = self._path.with_suffix(".json.tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with open(temp_path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
            temp_path.replace(self._path)
        except OSError as e:
            if temp_path.exists():
                try:
                    temp_path.unlink()
                except OSError:
                    self._logger.warning("Could not remove temp storage file", extra={"error": str(temp_path)})
            raise PersistenceError(f"Cannot write storage file {self._path}: {e}") from e
