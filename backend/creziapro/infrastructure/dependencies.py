"""FastAPI dependency injection — wires infrastructure to application layer."""

from fastapi import Request

from creziapro.config import get_settings
from creziapro.application.interfaces import AdminAuthenticator, ChatAgentGateway
from creziapro.application.services import RecordStore
from creziapro.infrastructure.auth import StaticCredentialAuthenticator
from creziapro.infrastructure.chat import HttpChatAgentGateway
from creziapro.infrastructure.database.session import async_session_factory
from creziapro.infrastructure.database.repositories import SQLAlchemyKeyValueStorage


async def get_record_store(request: Request) -> RecordStore:
    """Provides the tenant's RecordStore, building it on first use.

    The store lives on ``app.state`` until shutdown; its mirror is hydrated
    lazily by the first operation.
    """
    store: RecordStore | None = getattr(request.app.state, "record_store", None)
    if store is None:
        settings = get_settings()
        store = RecordStore(
            SQLAlchemyKeyValueStorage(async_session_factory),
            admin_session_ttl_ms=settings.admin_session_ttl_seconds * 1000,
        )
        request.app.state.record_store = store
    return store


async def get_admin_authenticator() -> AdminAuthenticator:
    """Provides the credential check for admin login."""
    settings = get_settings()
    return StaticCredentialAuthenticator(settings.admin_email, settings.admin_password)


async def get_chat_agent_gateway() -> ChatAgentGateway:
    """Provides the HTTP relay to the external chat agent."""
    settings = get_settings()
    return HttpChatAgentGateway(
        base_url=settings.chat_agent_url,
        timeout=settings.chat_agent_timeout,
    )
