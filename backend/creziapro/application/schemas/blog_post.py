"""Pydantic DTOs for blog posts."""

from pydantic import Field

from .common import CamelModel

SLUG_PATTERN = r"^[a-z0-9-]+$"


class BlogPostCreate(CamelModel):
    """Schema for creating a blog post. Slugs are lowercase, digits and hyphens."""

    title: str = Field(..., min_length=1, max_length=255)
    slug: str = Field(..., min_length=1, max_length=255, pattern=SLUG_PATTERN)
    content: str = Field(..., min_length=1)
    author: str = Field(..., min_length=1)
    published: bool = False


class BlogPostUpdate(CamelModel):
    """Schema for updating a blog post — all fields optional."""

    title: str | None = Field(None, min_length=1, max_length=255)
    slug: str | None = Field(None, min_length=1, max_length=255, pattern=SLUG_PATTERN)
    content: str | None = Field(None, min_length=1)
    author: str | None = Field(None, min_length=1)
    published: bool | None = None


class BlogPostResponse(CamelModel):
    id: str
    title: str
    slug: str
    content: str
    author: str
    published: bool
    created_at: int
