"""Review endpoints — public submission and approved listing, admin moderation."""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from creziapro.application.schemas import ApiResponse, ReviewCreate, ReviewResponse
from creziapro.application.services import RecordStore
from creziapro.domain.entities import ReviewStatus
from creziapro.infrastructure.dependencies import get_record_store
from creziapro.presentation.api.admin_guard import require_admin

router = APIRouter(prefix="/reviews", tags=["Reviews"])


@router.get("/approved", response_model=ApiResponse[list[ReviewResponse]])
async def list_approved_reviews(
    store: RecordStore = Depends(get_record_store),
) -> ApiResponse:
    reviews = await store.list_reviews(ReviewStatus.APPROVED)
    return ApiResponse(
        success=True,
        data=[ReviewResponse.model_validate(r) for r in reviews],
    )


@router.post(
    "",
    response_model=ApiResponse[ReviewResponse],
    status_code=status.HTTP_201_CREATED,
)
async def submit_review(
    data: ReviewCreate,
    store: RecordStore = Depends(get_record_store),
) -> ApiResponse:
    """Public submission — stored as pending until an admin approves it."""
    review = await store.add_review(data.model_dump())
    return ApiResponse(success=True, data=ReviewResponse.model_validate(review))


@router.get(
    "",
    response_model=ApiResponse[list[ReviewResponse]],
    dependencies=[Depends(require_admin)],
)
async def list_reviews(
    review_status: ReviewStatus | None = Query(None, alias="status"),
    store: RecordStore = Depends(get_record_store),
) -> ApiResponse:
    reviews = await store.list_reviews(review_status)
    return ApiResponse(
        success=True,
        data=[ReviewResponse.model_validate(r) for r in reviews],
    )


@router.put(
    "/{review_id}/approve",
    response_model=ApiResponse[ReviewResponse],
    dependencies=[Depends(require_admin)],
)
async def approve_review(
    review_id: str,
    store: RecordStore = Depends(get_record_store),
) -> ApiResponse:
    review = await store.update_review_status(review_id, ReviewStatus.APPROVED)
    if review is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Review not found")
    return ApiResponse(success=True, data=ReviewResponse.model_validate(review))


@router.delete(
    "/{review_id}",
    response_model=ApiResponse[None],
    dependencies=[Depends(require_admin)],
)
async def delete_review(
    review_id: str,
    store: RecordStore = Depends(get_record_store),
) -> ApiResponse:
    if not await store.delete_review(review_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Review not found")
    return ApiResponse(success=True)
