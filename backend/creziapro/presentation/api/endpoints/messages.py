"""Contact form submission (public) and the admin message inbox."""

from fastapi import APIRouter, Depends, HTTPException, status

from creziapro.application.schemas import (
    ApiResponse,
    ContactMessageCreate,
    ContactMessageResponse,
)
from creziapro.application.services import RecordStore
from creziapro.infrastructure.dependencies import get_record_store
from creziapro.presentation.api.admin_guard import require_admin

router = APIRouter(tags=["Contact Messages"])


@router.post("/contact", response_model=ApiResponse[ContactMessageResponse])
async def submit_contact_message(
    data: ContactMessageCreate,
    store: RecordStore = Depends(get_record_store),
) -> ApiResponse:
    message = await store.add_contact_message(data.model_dump())
    return ApiResponse(success=True, data=ContactMessageResponse.model_validate(message))


@router.get(
    "/messages",
    response_model=ApiResponse[list[ContactMessageResponse]],
    dependencies=[Depends(require_admin)],
)
async def list_messages(
    store: RecordStore = Depends(get_record_store),
) -> ApiResponse:
    """Inbox, newest first."""
    messages = await store.list_contact_messages()
    return ApiResponse(
        success=True,
        data=[ContactMessageResponse.model_validate(m) for m in messages],
    )


@router.put(
    "/messages/{message_id}/read",
    response_model=ApiResponse[None],
    dependencies=[Depends(require_admin)],
)
async def mark_message_read(
    message_id: str,
    store: RecordStore = Depends(get_record_store),
) -> ApiResponse:
    if not await store.mark_message_as_read(message_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Message not found")
    return ApiResponse(success=True)


@router.delete(
    "/messages/{message_id}",
    response_model=ApiResponse[None],
    dependencies=[Depends(require_admin)],
)
async def delete_message(
    message_id: str,
    store: RecordStore = Depends(get_record_store),
) -> ApiResponse:
    if not await store.delete_contact_message(message_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Message not found")
    return ApiResponse(success=True)
