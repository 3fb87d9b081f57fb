from __future__ import annotations

from beauty_advisor.application.ports.storage import KeyValueStoragePort


class MemoryKeyValueStorage(KeyValueStoragePort):
    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._values: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value

    def delete(self, key: str) -> None:
        self._values.pop(key, None)
