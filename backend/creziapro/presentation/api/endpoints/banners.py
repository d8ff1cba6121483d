"""Home page banner endpoints — public listing, admin CRUD."""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from creziapro.application.schemas import (
    ApiResponse,
    BannerCreate,
    BannerResponse,
    BannerUpdate,
)
from creziapro.application.services import RecordStore
from creziapro.infrastructure.dependencies import get_record_store
from creziapro.presentation.api.admin_guard import require_admin

router = APIRouter(prefix="/banners", tags=["Banners"])


@router.get("", response_model=ApiResponse[list[BannerResponse]])
async def list_banners(
    published_only: bool = Query(False, alias="publishedOnly"),
    store: RecordStore = Depends(get_record_store),
) -> ApiResponse:
    banners = await store.list_banners(published_only=published_only)
    return ApiResponse(
        success=True,
        data=[BannerResponse.model_validate(b) for b in banners],
    )


@router.post(
    "",
    response_model=ApiResponse[BannerResponse],
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
async def create_banner(
    data: BannerCreate,
    store: RecordStore = Depends(get_record_store),
) -> ApiResponse:
    banner = await store.add_banner(data.model_dump())
    return ApiResponse(success=True, data=BannerResponse.model_validate(banner))


@router.put(
    "/{banner_id}",
    response_model=ApiResponse[BannerResponse],
    dependencies=[Depends(require_admin)],
)
async def update_banner(
    banner_id: str,
    data: BannerUpdate,
    store: RecordStore = Depends(get_record_store),
) -> ApiResponse:
    banner = await store.update_banner(
        banner_id, data.model_dump(exclude_unset=True, exclude_none=True)
    )
    if banner is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Banner not found")
    return ApiResponse(success=True, data=BannerResponse.model_validate(banner))


@router.delete(
    "/{banner_id}",
    response_model=ApiResponse[None],
    dependencies=[Depends(require_admin)],
)
async def delete_banner(
    banner_id: str,
    store: RecordStore = Depends(get_record_store),
) -> ApiResponse:
    if not await store.delete_banner(banner_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Banner not found")
    return ApiResponse(success=True)
