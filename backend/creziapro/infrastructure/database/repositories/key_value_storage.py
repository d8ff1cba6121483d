"""Durable key-value storage for the record store, backed by SQLAlchemy."""

import logging
from collections.abc import Iterable
from typing import Any

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from creziapro.application.interfaces import KeyValueStorage
from creziapro.domain.exceptions import StorageError
from creziapro.infrastructure.database.models import KeyValueEntryModel

logger = logging.getLogger(__name__)


class SQLAlchemyKeyValueStorage(KeyValueStorage):
    """Implements the KeyValueStorage port on the ``kv_entries`` table.

    The record store outlives any single request, so every call opens its
    own session and commits before returning.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory

    async def list_all(self) -> dict[str, Any]:
        try:
            async with self._session_factory() as session:
                result = await session.execute(select(KeyValueEntryModel))
                return {row.key: row.value for row in result.scalars().all()}
        except SQLAlchemyError as exc:
            logger.error("Listing key-value entries failed: %s", exc)
            raise StorageError("list", "*", str(exc)) from exc

    async def get(self, key: str) -> Any | None:
        try:
            async with self._session_factory() as session:
                model = await session.get(KeyValueEntryModel, key)
                return model.value if model else None
        except SQLAlchemyError as exc:
            raise StorageError("get", key, str(exc)) from exc

    async def put(self, key: str, value: Any) -> None:
        try:
            async with self._session_factory() as session:
                model = await session.get(KeyValueEntryModel, key)
                if model is None:
                    session.add(KeyValueEntryModel(key=key, value=value))
                else:
                    model.value = value
                await session.commit()
        except SQLAlchemyError as exc:
            logger.error("Writing key '%s' failed: %s", key, exc)
            raise StorageError("put", key, str(exc)) from exc

    async def delete(self, key: str) -> bool:
        try:
            async with self._session_factory() as session:
                result = await session.execute(
                    delete(KeyValueEntryModel).where(KeyValueEntryModel.key == key)
                )
                await session.commit()
                return result.rowcount > 0
        except SQLAlchemyError as exc:
            logger.error("Deleting key '%s' failed: %s", key, exc)
            raise StorageError("delete", key, str(exc)) from exc

    async def delete_many(self, keys: Iterable[str]) -> int:
        keys = list(keys)
        if not keys:
            return 0
        try:
            async with self._session_factory() as session:
                result = await session.execute(
                    delete(KeyValueEntryModel).where(KeyValueEntryModel.key.in_(keys))
                )
                await session.commit()
                return result.rowcount
        except SQLAlchemyError as exc:
            logger.error("Bulk delete of %d keys failed: %s", len(keys), exc)
            raise StorageError("delete", ",".join(keys), str(exc)) from exc
