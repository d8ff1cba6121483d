"""Domain entity for customer reviews and their moderation state."""

from dataclasses import dataclass
from enum import Enum


class ReviewStatus(str, Enum):
    """Moderation state — new reviews are always pending."""

    PENDING = "pending"
    APPROVED = "approved"


@dataclass(frozen=True)
class Review:
    id: str
    name: str
    rating: int
    comment: str
    created_at: int
    status: ReviewStatus = ReviewStatus.PENDING
