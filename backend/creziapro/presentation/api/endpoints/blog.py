"""Blog endpoints — public reading by list or slug, admin CRUD."""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from creziapro.application.schemas import (
    ApiResponse,
    BlogPostCreate,
    BlogPostResponse,
    BlogPostUpdate,
)
from creziapro.application.services import RecordStore
from creziapro.infrastructure.dependencies import get_record_store
from creziapro.presentation.api.admin_guard import require_admin

router = APIRouter(prefix="/blog", tags=["Blog"])


@router.get("", response_model=ApiResponse[list[BlogPostResponse]])
async def list_blog_posts(
    published_only: bool = Query(False, alias="publishedOnly"),
    store: RecordStore = Depends(get_record_store),
) -> ApiResponse:
    """Blog posts, newest first."""
    posts = await store.list_blog_posts(published_only=published_only)
    return ApiResponse(
        success=True,
        data=[BlogPostResponse.model_validate(p) for p in posts],
    )


@router.get("/{slug}", response_model=ApiResponse[BlogPostResponse])
async def get_blog_post(
    slug: str,
    store: RecordStore = Depends(get_record_store),
) -> ApiResponse:
    """A single published post by slug."""
    post = await store.get_blog_post_by_slug(slug)
    if post is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Post not found")
    return ApiResponse(success=True, data=BlogPostResponse.model_validate(post))


@router.post(
    "",
    response_model=ApiResponse[BlogPostResponse],
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
async def create_blog_post(
    data: BlogPostCreate,
    store: RecordStore = Depends(get_record_store),
) -> ApiResponse:
    post = await store.add_blog_post(data.model_dump())
    return ApiResponse(success=True, data=BlogPostResponse.model_validate(post))


@router.put(
    "/{post_id}",
    response_model=ApiResponse[BlogPostResponse],
    dependencies=[Depends(require_admin)],
)
async def update_blog_post(
    post_id: str,
    data: BlogPostUpdate,
    store: RecordStore = Depends(get_record_store),
) -> ApiResponse:
    post = await store.update_blog_post(
        post_id, data.model_dump(exclude_unset=True, exclude_none=True)
    )
    if post is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Blog post not found")
    return ApiResponse(success=True, data=BlogPostResponse.model_validate(post))


@router.delete(
    "/{post_id}",
    response_model=ApiResponse[None],
    dependencies=[Depends(require_admin)],
)
async def delete_blog_post(
    post_id: str,
    store: RecordStore = Depends(get_record_store),
) -> ApiResponse:
    if not await store.delete_blog_post(post_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Blog post not found")
    return ApiResponse(success=True)
