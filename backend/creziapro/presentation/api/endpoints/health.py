"""Health check endpoint — no storage access, always available."""

from fastapi import APIRouter

from creziapro.config import get_settings

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check() -> dict:
    """Reports version, environment and whether the chat relay is wired up."""
    settings = get_settings()
    return {
        "status": "healthy",
        "version": settings.app_version,
        "environment": settings.app_env,
        "chat_agent": "configured" if settings.chat_agent_url else "disabled",
    }
