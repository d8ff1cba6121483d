"""Admin dashboard statistics."""

from fastapi import APIRouter, Depends

from creziapro.application.schemas import ApiResponse, DashboardStatsResponse
from creziapro.application.services import RecordStore
from creziapro.infrastructure.dependencies import get_record_store
from creziapro.presentation.api.admin_guard import require_admin

router = APIRouter(prefix="/dashboard", tags=["Dashboard"])


@router.get(
    "/stats",
    response_model=ApiResponse[DashboardStatsResponse],
    dependencies=[Depends(require_admin)],
)
async def get_stats(
    store: RecordStore = Depends(get_record_store),
) -> ApiResponse:
    stats = await store.get_stats()
    return ApiResponse(success=True, data=DashboardStatsResponse.model_validate(stats))
