"""Chat relay — forwards chat turns to the external agent owning the session."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Request, Response

from creziapro.application.interfaces import ChatAgentGateway
from creziapro.application.services import RecordStore
from creziapro.domain.exceptions import ChatAgentError
from creziapro.infrastructure.dependencies import get_chat_agent_gateway, get_record_store

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/chat", tags=["Chat"])


@router.api_route(
    "/{session_id}/{path:path}",
    methods=["GET", "POST", "PUT", "PATCH", "DELETE"],
)
async def relay_chat(
    session_id: str,
    path: str,
    request: Request,
    gateway: ChatAgentGateway = Depends(get_chat_agent_gateway),
    store: RecordStore = Depends(get_record_store),
) -> Response:
    """Relay the request verbatim and mark the session as active on success."""
    body = await request.body()
    try:
        reply = await gateway.forward(
            session_id,
            request.method,
            path,
            query=request.url.query,
            headers=dict(request.headers),
            body=body or None,
        )
    except ChatAgentError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)

    if reply.status_code < 400:
        await store.update_session_activity(session_id)
    else:
        logger.warning("Chat agent answered %d for session %s", reply.status_code, session_id)

    return Response(
        content=reply.content,
        status_code=reply.status_code,
        headers=reply.headers,
    )
