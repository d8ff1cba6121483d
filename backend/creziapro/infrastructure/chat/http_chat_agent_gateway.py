"""HTTP gateway to the external chat agent — implements the ChatAgentGateway port.

Each chat session is served by the agent under ``<base_url>/<session_id>/...``;
requests are relayed verbatim and the reply is passed back unchanged.
"""

import logging

import httpx

from creziapro.application.interfaces import AgentResponse, ChatAgentGateway
from creziapro.domain.exceptions import ChatAgentError

logger = logging.getLogger(__name__)

# Per-hop headers plus the browser cookie, which carries the admin session.
_DROPPED_HEADERS = frozenset({
    "host",
    "connection",
    "content-length",
    "content-encoding",
    "transfer-encoding",
    "keep-alive",
    "cookie",
})


def _relayable(headers: dict[str, str] | httpx.Headers | None) -> dict[str, str]:
    if not headers:
        return {}
    return {k: v for k, v in headers.items() if k.lower() not in _DROPPED_HEADERS}


class HttpChatAgentGateway(ChatAgentGateway):
    """Infrastructure adapter — relays chat turns over HTTP with httpx."""

    def __init__(
        self,
        base_url: str,
        timeout: float = 60.0,
        http_client: httpx.AsyncClient | None = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._http_client = http_client

    def _build_url(self, session_id: str, path: str, query: str) -> str:
        url = f"{self._base_url}/{session_id}/{path.lstrip('/')}"
        return f"{url}?{query}" if query else url

    async def forward(
        self,
        session_id: str,
        method: str,
        path: str,
        *,
        query: str = "",
        headers: dict[str, str] | None = None,
        body: bytes | None = None,
    ) -> AgentResponse:
        if not self._base_url:
            raise ChatAgentError(503, "Chat agent is not configured")

        url = self._build_url(session_id, path, query)
        client = self._http_client or httpx.AsyncClient(timeout=self._timeout)
        should_close = self._http_client is None

        try:
            response = await client.request(
                method,
                url,
                headers=_relayable(headers),
                content=body or None,
            )
        except httpx.HTTPError as exc:
            logger.error("Chat agent request %s %s failed: %s", method, url, exc)
            raise ChatAgentError(502, f"Failed to reach chat agent: {exc}") from exc
        finally:
            if should_close:
                await client.aclose()

        return AgentResponse(
            status_code=response.status_code,
            content=response.content,
            headers=_relayable(response.headers),
        )
