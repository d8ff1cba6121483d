"""Chat session registry — metadata only, conversations live in the chat agent."""

import uuid
from datetime import datetime

from fastapi import APIRouter, Body, Depends, HTTPException, status

from creziapro.application.schemas import (
    ApiResponse,
    SessionCreate,
    SessionCreated,
    SessionDeleted,
    SessionResponse,
    SessionsCleared,
    SessionTitleResponse,
    SessionTitleUpdate,
)
from creziapro.application.services import RecordStore, derive_session_title
from creziapro.infrastructure.dependencies import get_record_store

router = APIRouter(prefix="/sessions", tags=["Chat Sessions"])


@router.get("", response_model=ApiResponse[list[SessionResponse]])
async def list_sessions(
    store: RecordStore = Depends(get_record_store),
) -> ApiResponse:
    """Sessions, most recently active first."""
    sessions = await store.list_sessions()
    return ApiResponse(
        success=True,
        data=[SessionResponse.model_validate(s) for s in sessions],
    )


@router.post("", response_model=ApiResponse[SessionCreated])
async def create_session(
    data: SessionCreate | None = Body(None),
    store: RecordStore = Depends(get_record_store),
) -> ApiResponse:
    data = data or SessionCreate()
    session_id = data.session_id or str(uuid.uuid4())
    title = derive_session_title(data.title, data.first_message, datetime.now())
    await store.add_session(session_id, title)
    return ApiResponse(success=True, data=SessionCreated(session_id=session_id, title=title))


@router.delete("", response_model=ApiResponse[SessionsCleared])
async def clear_sessions(
    store: RecordStore = Depends(get_record_store),
) -> ApiResponse:
    deleted = await store.clear_all_sessions()
    return ApiResponse(success=True, data=SessionsCleared(deleted_count=deleted))


@router.delete("/{session_id}", response_model=ApiResponse[SessionDeleted])
async def delete_session(
    session_id: str,
    store: RecordStore = Depends(get_record_store),
) -> ApiResponse:
    if not await store.remove_session(session_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Session not found")
    return ApiResponse(success=True, data=SessionDeleted(deleted=True))


@router.put("/{session_id}/title", response_model=ApiResponse[SessionTitleResponse])
async def update_session_title(
    session_id: str,
    data: SessionTitleUpdate,
    store: RecordStore = Depends(get_record_store),
) -> ApiResponse:
    if not await store.update_session_title(session_id, data.title):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Session not found")
    return ApiResponse(success=True, data=SessionTitleResponse(title=data.title))
