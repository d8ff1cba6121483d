"""Service catalogue endpoints — public listing, admin CRUD."""

from fastapi import APIRouter, Depends, HTTPException, status

from creziapro.application.schemas import (
    ApiResponse,
    ServiceCreate,
    ServiceResponse,
    ServiceUpdate,
)
from creziapro.application.services import RecordStore
from creziapro.infrastructure.dependencies import get_record_store
from creziapro.presentation.api.admin_guard import require_admin

router = APIRouter(prefix="/services", tags=["Services"])


@router.get("", response_model=ApiResponse[list[ServiceResponse]])
async def list_services(
    store: RecordStore = Depends(get_record_store),
) -> ApiResponse:
    services = await store.list_services()
    return ApiResponse(
        success=True,
        data=[ServiceResponse.model_validate(s) for s in services],
    )


@router.post(
    "",
    response_model=ApiResponse[ServiceResponse],
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
async def create_service(
    data: ServiceCreate,
    store: RecordStore = Depends(get_record_store),
) -> ApiResponse:
    service = await store.add_service(data.model_dump())
    return ApiResponse(success=True, data=ServiceResponse.model_validate(service))


@router.put(
    "/{service_id}",
    response_model=ApiResponse[ServiceResponse],
    dependencies=[Depends(require_admin)],
)
async def update_service(
    service_id: str,
    data: ServiceUpdate,
    store: RecordStore = Depends(get_record_store),
) -> ApiResponse:
    service = await store.update_service(
        service_id, data.model_dump(exclude_unset=True, exclude_none=True)
    )
    if service is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Service not found")
    return ApiResponse(success=True, data=ServiceResponse.model_validate(service))


@router.delete(
    "/{service_id}",
    response_model=ApiResponse[None],
    dependencies=[Depends(require_admin)],
)
async def delete_service(
    service_id: str,
    store: RecordStore = Depends(get_record_store),
) -> ApiResponse:
    if not await store.delete_service(service_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Service not found")
    return ApiResponse(success=True)
