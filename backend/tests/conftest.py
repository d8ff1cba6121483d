"""Shared fakes for the record store and API tests."""

import asyncio
import copy
from collections.abc import Iterable
from typing import Any

import pytest

from creziapro.application.interfaces import KeyValueStorage
from creziapro.application.services import RecordStore
from creziapro.domain.exceptions import StorageError

HOUR_MS = 60 * 60 * 1000


class FakeKeyValueStorage(KeyValueStorage):
    """In-memory fake durable storage for unit testing.

    Values are deep-copied in and out, like a real serializing medium.
    Set ``fail_writes`` to make every mutation raise ``StorageError``.
    """

    def __init__(self, entries: dict[str, Any] | None = None):
        self.entries: dict[str, Any] = copy.deepcopy(entries or {})
        self.fail_writes = False
        self.list_calls = 0

    async def list_all(self) -> dict[str, Any]:
        self.list_calls += 1
        await asyncio.sleep(0)
        return copy.deepcopy(self.entries)

    async def get(self, key: str) -> Any | None:
        return copy.deepcopy(self.entries.get(key))

    async def put(self, key: str, value: Any) -> None:
        if self.fail_writes:
            raise StorageError("put", key, "medium unavailable")
        await asyncio.sleep(0)
        self.entries[key] = copy.deepcopy(value)

    async def delete(self, key: str) -> bool:
        if self.fail_writes:
            raise StorageError("delete", key, "medium unavailable")
        return self.entries.pop(key, None) is not None

    async def delete_many(self, keys: Iterable[str]) -> int:
        keys = list(keys)
        if self.fail_writes:
            raise StorageError("delete", ",".join(keys), "medium unavailable")
        return sum(1 for key in keys if self.entries.pop(key, None) is not None)


class FakeClock:
    """Controllable epoch-millisecond clock."""

    def __init__(self, start: int = 1_700_000_000_000):
        self.now = start

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int) -> None:
        self.now += ms


@pytest.fixture
def storage() -> FakeKeyValueStorage:
    return FakeKeyValueStorage()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def store(storage: FakeKeyValueStorage, clock: FakeClock) -> RecordStore:
    return RecordStore(storage, clock=clock)
