"""Abstract credential check for the admin back office (port)."""

from abc import ABC, abstractmethod


class AdminAuthenticator(ABC):
    """Port — verifies admin login credentials.

    Kept apart from the record store so a real identity provider can
    replace the built-in single-account check.
    """

    @abstractmethod
    async def authenticate(self, email: str, password: str) -> str | None:
        """Return the admin user id for valid credentials, otherwise None."""
        ...
