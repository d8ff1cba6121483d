"""Portfolio project endpoints — public listing, admin CRUD."""

from fastapi import APIRouter, Depends, HTTPException, status

from creziapro.application.schemas import (
    ApiResponse,
    ProjectCreate,
    ProjectResponse,
    ProjectUpdate,
)
from creziapro.application.services import RecordStore
from creziapro.infrastructure.dependencies import get_record_store
from creziapro.presentation.api.admin_guard import require_admin

router = APIRouter(prefix="/projects", tags=["Projects"])


@router.get("", response_model=ApiResponse[list[ProjectResponse]])
async def list_projects(
    store: RecordStore = Depends(get_record_store),
) -> ApiResponse:
    projects = await store.list_projects()
    return ApiResponse(
        success=True,
        data=[ProjectResponse.model_validate(p) for p in projects],
    )


@router.post(
    "",
    response_model=ApiResponse[ProjectResponse],
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
async def create_project(
    data: ProjectCreate,
    store: RecordStore = Depends(get_record_store),
) -> ApiResponse:
    project = await store.add_project(data.model_dump(mode="json"))
    return ApiResponse(success=True, data=ProjectResponse.model_validate(project))


@router.put(
    "/{project_id}",
    response_model=ApiResponse[ProjectResponse],
    dependencies=[Depends(require_admin)],
)
async def update_project(
    project_id: str,
    data: ProjectUpdate,
    store: RecordStore = Depends(get_record_store),
) -> ApiResponse:
    project = await store.update_project(
        project_id, data.model_dump(mode="json", exclude_unset=True, exclude_none=True)
    )
    if project is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Project not found")
    return ApiResponse(success=True, data=ProjectResponse.model_validate(project))


@router.delete(
    "/{project_id}",
    response_model=ApiResponse[None],
    dependencies=[Depends(require_admin)],
)
async def delete_project(
    project_id: str,
    store: RecordStore = Depends(get_record_store),
) -> ApiResponse:
    if not await store.delete_project(project_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Project not found")
    return ApiResponse(success=True)
