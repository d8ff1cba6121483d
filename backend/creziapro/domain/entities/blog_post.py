"""Domain entity for blog posts."""

from dataclasses import dataclass


@dataclass(frozen=True)
class BlogPost:
    """A blog article.

    ``slug`` is expected to be unique, but uniqueness is a convention of the
    admin UI and is not enforced by the store.
    """

    id: str
    title: str
    slug: str
    content: str
    author: str
    created_at: int
    published: bool = False
