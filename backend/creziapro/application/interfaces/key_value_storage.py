"""Abstract durable key-value storage interface (port) backing the record store."""

from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import Any


class KeyValueStorage(ABC):
    """Port for the durable medium behind the record store.

    Values are JSON-compatible (dicts, lists, strings, numbers, booleans).
    Implementations raise ``StorageError`` when the medium rejects an
    operation and never retry on their own.
    """

    @abstractmethod
    async def list_all(self) -> dict[str, Any]:
        """Return every stored entry keyed by its full storage key."""
        ...

    @abstractmethod
    async def get(self, key: str) -> Any | None:
        """Return the value stored under ``key`` or None."""
        ...

    @abstractmethod
    async def put(self, key: str, value: Any) -> None:
        """Insert or replace the value stored under ``key``."""
        ...

    @abstractmethod
    async def delete(self, key: str) -> bool:
        """Delete one entry. Returns True if it existed."""
        ...

    @abstractmethod
    async def delete_many(self, keys: Iterable[str]) -> int:
        """Delete several entries at once. Returns the number removed."""
        ...
