"""Admin login, logout and session verification."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status

from creziapro.application.interfaces import AdminAuthenticator
from creziapro.application.schemas import ApiResponse, LoginRequest
from creziapro.application.services import RecordStore
from creziapro.config import get_settings
from creziapro.infrastructure.dependencies import get_admin_authenticator, get_record_store
from creziapro.presentation.api.admin_guard import require_admin

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin", tags=["Admin Auth"])


@router.post("/login", response_model=ApiResponse[None])
async def login(
    credentials: LoginRequest,
    request: Request,
    response: Response,
    authenticator: AdminAuthenticator = Depends(get_admin_authenticator),
    store: RecordStore = Depends(get_record_store),
) -> ApiResponse:
    """Check the credentials and set the httpOnly session cookie."""
    user_id = await authenticator.authenticate(credentials.email, credentials.password)
    if user_id is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
        )

    settings = get_settings()
    token = await store.create_admin_session(user_id)
    response.set_cookie(
        settings.admin_cookie_name,
        token,
        max_age=settings.admin_session_ttl_seconds,
        path="/",
        secure=request.url.scheme == "https",
        httponly=True,
        samesite="lax",
    )
    return ApiResponse(success=True)


@router.post("/logout", response_model=ApiResponse[None])
async def logout(
    request: Request,
    response: Response,
    store: RecordStore = Depends(get_record_store),
) -> ApiResponse:
    """Drop the admin session (if any) and clear the cookie."""
    cookie_name = get_settings().admin_cookie_name
    token = request.cookies.get(cookie_name)
    if token:
        await store.delete_admin_session(token)
    response.delete_cookie(cookie_name, path="/")
    return ApiResponse(success=True)


@router.get(
    "/verify",
    response_model=ApiResponse[None],
    dependencies=[Depends(require_admin)],
)
async def verify() -> ApiResponse:
    return ApiResponse(success=True)
