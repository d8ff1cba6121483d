"""Single-account admin credential check."""

import logging
import secrets

from creziapro.application.interfaces import AdminAuthenticator

logger = logging.getLogger(__name__)


class StaticCredentialAuthenticator(AdminAuthenticator):
    """Accepts exactly one configured email/password pair.

    The account's email doubles as its user id.
    """

    def __init__(self, email: str, password: str):
        self._email = email
        self._password = password

    async def authenticate(self, email: str, password: str) -> str | None:
        email_ok = secrets.compare_digest(email.encode(), self._email.encode())
        password_ok = secrets.compare_digest(password.encode(), self._password.encode())
        if email_ok and password_ok:
            return self._email
        logger.warning("Rejected admin login for %s", email)
        return None
