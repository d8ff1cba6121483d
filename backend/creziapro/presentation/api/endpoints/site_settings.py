"""Site settings and chatbot configuration endpoints."""

from fastapi import APIRouter, Depends

from creziapro.application.schemas import (
    ApiResponse,
    ChatbotConfigResponse,
    SiteSettingsSchema,
)
from creziapro.application.services import RecordStore
from creziapro.infrastructure.dependencies import get_record_store
from creziapro.presentation.api.admin_guard import require_admin

router = APIRouter(tags=["Site Settings"])


@router.get("/settings", response_model=ApiResponse[SiteSettingsSchema])
async def get_site_settings(
    store: RecordStore = Depends(get_record_store),
) -> ApiResponse:
    settings = await store.get_site_settings()
    return ApiResponse(success=True, data=SiteSettingsSchema.model_validate(settings))


@router.put(
    "/settings",
    response_model=ApiResponse[SiteSettingsSchema],
    dependencies=[Depends(require_admin)],
)
async def replace_site_settings(
    data: SiteSettingsSchema,
    store: RecordStore = Depends(get_record_store),
) -> ApiResponse:
    """Replace the settings as a whole; omitted optional links are cleared."""
    settings = await store.update_site_settings(data.model_dump())
    return ApiResponse(success=True, data=SiteSettingsSchema.model_validate(settings))


@router.get("/chatbot/config", response_model=ApiResponse[ChatbotConfigResponse])
async def get_chatbot_config(
    store: RecordStore = Depends(get_record_store),
) -> ApiResponse:
    """System prompt and service catalogue for the chat agent."""
    config = await store.get_chatbot_config()
    return ApiResponse(success=True, data=ChatbotConfigResponse.model_validate(config))
