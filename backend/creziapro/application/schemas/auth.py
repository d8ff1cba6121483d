"""Pydantic DTOs for admin login."""

from pydantic import Field

from .common import CamelModel


class LoginRequest(CamelModel):
    email: str = Field(..., min_length=1, max_length=255)
    password: str = Field(..., min_length=1, max_length=255)
