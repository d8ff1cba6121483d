"""Unit tests for the single-account admin authenticator."""

import pytest

from creziapro.infrastructure.auth import StaticCredentialAuthenticator


@pytest.fixture
def authenticator() -> StaticCredentialAuthenticator:
    return StaticCredentialAuthenticator("admin@creziapro.com", "password")


@pytest.mark.asyncio
async def test_matching_credentials_return_user_id(authenticator):
    assert await authenticator.authenticate("admin@creziapro.com", "password") == "admin@creziapro.com"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "email, password",
    [
        ("admin@creziapro.com", "wrong"),
        ("someone@creziapro.com", "password"),
        ("", ""),
    ],
)
async def test_wrong_credentials_are_rejected(authenticator, email, password):
    assert await authenticator.authenticate(email, password) is None
