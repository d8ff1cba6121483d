"""Shared DTO building blocks — camelCase wire format and the response envelope."""

from typing import Generic, TypeVar

from pydantic import BaseModel
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class CamelModel(BaseModel):
    """Base for all DTOs: snake_case in Python, camelCase on the wire."""

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "from_attributes": True,
    }


class ApiResponse(BaseModel, Generic[T]):
    """Envelope wrapping every JSON response of the API."""

    success: bool
    data: T | None = None
    error: str | None = None
