"""Read-only aggregates composed from the record collections."""

from dataclasses import dataclass

from .service import Service


@dataclass(frozen=True)
class DashboardStats:
    """Collection sizes shown on the admin dashboard."""

    messages: int
    services: int
    projects: int
    blog_posts: int


@dataclass(frozen=True)
class ChatbotConfig:
    """Everything the chat agent needs to answer pricing questions."""

    prompt: str
    services: tuple[Service, ...]
