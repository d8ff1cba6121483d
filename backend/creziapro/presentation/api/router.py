"""Top-level API router — aggregates all endpoint routers under /api."""

from fastapi import APIRouter

from creziapro.presentation.api.endpoints.health import router as health_router
from creziapro.presentation.api.endpoints.auth import router as auth_router
from creziapro.presentation.api.endpoints.services import router as services_router
from creziapro.presentation.api.endpoints.projects import router as projects_router
from creziapro.presentation.api.endpoints.blog import router as blog_router
from creziapro.presentation.api.endpoints.banners import router as banners_router
from creziapro.presentation.api.endpoints.reviews import router as reviews_router
from creziapro.presentation.api.endpoints.messages import router as messages_router
from creziapro.presentation.api.endpoints.site_settings import router as site_settings_router
from creziapro.presentation.api.endpoints.dashboard import router as dashboard_router
from creziapro.presentation.api.endpoints.sessions import router as sessions_router
from creziapro.presentation.api.endpoints.chat import router as chat_router

router = APIRouter(prefix="/api")
router.include_router(health_router)
router.include_router(auth_router)
router.include_router(services_router)
router.include_router(projects_router)
router.include_router(blog_router)
router.include_router(banners_router)
router.include_router(reviews_router)
router.include_router(messages_router)
router.include_router(site_settings_router)
router.include_router(dashboard_router)
router.include_router(sessions_router)
router.include_router(chat_router)
