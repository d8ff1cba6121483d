"""Admin cookie guard shared by all back-office routes."""

from fastapi import Depends, HTTPException, Request, Response, status

from creziapro.application.services import RecordStore
from creziapro.config import get_settings
from creziapro.domain.entities import AdminSession
from creziapro.infrastructure.dependencies import get_record_store


def clear_admin_cookie_headers() -> dict[str, str]:
    """``Set-Cookie`` header that removes the admin session cookie."""
    response = Response()
    response.delete_cookie(get_settings().admin_cookie_name, path="/")
    return {"set-cookie": response.headers["set-cookie"]}


async def require_admin(
    request: Request,
    store: RecordStore = Depends(get_record_store),
) -> AdminSession:
    """Resolve the admin session from the cookie or reject with 401."""
    token = request.cookies.get(get_settings().admin_cookie_name)
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized: No session",
        )
    session = await store.verify_admin_session(token)
    if session is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized: Invalid session",
            headers=clear_admin_cookie_headers(),
        )
    return session
