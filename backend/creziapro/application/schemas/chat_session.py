"""Pydantic DTOs for the chat session registry."""

from pydantic import Field

from .common import CamelModel


class SessionCreate(CamelModel):
    """Register a chat session. Every field is optional."""

    title: str | None = None
    session_id: str | None = Field(None, min_length=1, max_length=255)
    first_message: str | None = None


class SessionTitleUpdate(CamelModel):
    title: str = Field(..., min_length=1, max_length=255)


class SessionResponse(CamelModel):
    id: str
    title: str
    created_at: int
    last_active: int


class SessionCreated(CamelModel):
    session_id: str
    title: str


class SessionTitleResponse(CamelModel):
    title: str


class SessionDeleted(CamelModel):
    deleted: bool


class SessionsCleared(CamelModel):
    deleted_count: int
