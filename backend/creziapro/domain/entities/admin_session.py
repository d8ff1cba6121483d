"""Domain entity for an authenticated admin back-office session."""

from dataclasses import dataclass


@dataclass(frozen=True)
class AdminSession:
    """Session bound to an opaque cookie token.

    ``expires`` is an absolute epoch-millisecond deadline; the session is
    invalid once the current time passes it.
    """

    user_id: str
    expires: int

    def is_expired(self, now_ms: int) -> bool:
        return now_ms >= self.expires
