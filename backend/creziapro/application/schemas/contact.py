"""Pydantic DTOs for contact form messages."""

from pydantic import Field

from .common import CamelModel


class ContactMessageCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=255)
    email: str = Field(..., min_length=3, max_length=255, examples=["jane@example.com"])
    message: str = Field(..., min_length=1)


class ContactMessageResponse(CamelModel):
    id: str
    name: str
    email: str
    message: str
    timestamp: int
    read: bool
