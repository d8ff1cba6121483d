"""Domain entity for chat session metadata (the conversations themselves live in the chat agent)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class SessionInfo:
    """Registry entry for one chat widget conversation.

    Timestamps are epoch milliseconds; ``last_active`` never precedes
    ``created_at``.
    """

    id: str
    title: str
    created_at: int
    last_active: int
