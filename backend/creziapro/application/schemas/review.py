"""Pydantic DTOs for customer reviews."""

from pydantic import Field

from creziapro.domain.entities import ReviewStatus

from .common import CamelModel


class ReviewCreate(CamelModel):
    """Public review submission. Status is never accepted from the client."""

    name: str = Field(..., min_length=1, max_length=255)
    rating: int = Field(..., ge=1, le=5)
    comment: str = Field(..., min_length=1)


class ReviewResponse(CamelModel):
    id: str
    name: str
    rating: int
    comment: str
    status: ReviewStatus
    created_at: int
