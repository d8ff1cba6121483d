"""SQLAlchemy ORM model for one durable key-value entry."""

from typing import Any

from sqlalchemy import JSON, String
from sqlalchemy.orm import Mapped, mapped_column

from creziapro.infrastructure.database.base import Base, TimestampMixin


class KeyValueEntryModel(TimestampMixin, Base):
    """ORM model — maps to the 'kv_entries' table.

    Keys carry the record namespace prefix (``service_<id>``, ...).
    """

    __tablename__ = "kv_entries"

    key: Mapped[str] = mapped_column(String(255), primary_key=True)
    value: Mapped[Any] = mapped_column(JSON, nullable=False)

    def __repr__(self) -> str:
        return f"<KeyValueEntryModel(key='{self.key}')>"
