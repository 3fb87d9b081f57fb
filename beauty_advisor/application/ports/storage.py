from __future__ import annotations

from abc import ABC, abstractmethod


class KeyValueStoragePort(ABC):
    """Durable string key-value surface shared by the whole session.

    Adapters raise PersistenceError when the backing store cannot be read or written.
    """

    @abstractmethod
    def get(self, key: str) -> str | None:
        """Return the stored value, or None if the key is absent."""
        raise NotImplementedError

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        raise NotImplementedError

    @abstractmethod
    def delete(self, key: str) -> None:
        raise NotImplementedError
