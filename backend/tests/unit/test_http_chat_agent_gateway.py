"""Unit tests for the HTTP chat agent gateway."""

import httpx
import pytest

from creziapro.domain.exceptions import ChatAgentError
from creziapro.infrastructure.chat import HttpChatAgentGateway


# ── Helpers ──


def _recording_transport(seen: list[httpx.Request], **response_kwargs) -> httpx.MockTransport:
    """Create a mock transport that records requests and replies with a fixed response."""

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(**{"status_code": 200, **response_kwargs})

    return httpx.MockTransport(handler)


def _gateway(transport: httpx.MockTransport, base_url: str = "http://agent.test/agents/chat/") -> HttpChatAgentGateway:
    return HttpChatAgentGateway(base_url, http_client=httpx.AsyncClient(transport=transport))


# ── Tests ──


@pytest.mark.asyncio
async def test_forward_targets_session_url_and_relays_body():
    seen: list[httpx.Request] = []
    gateway = _gateway(_recording_transport(seen, content=b'{"reply":"Hi there"}'))

    response = await gateway.forward(
        "abc",
        "POST",
        "/message",
        query="stream=false",
        headers={"content-type": "application/json", "cookie": "creziapro_admin_session=x"},
        body=b'{"text": "hello"}',
    )

    assert len(seen) == 1
    request = seen[0]
    assert str(request.url) == "http://agent.test/agents/chat/abc/message?stream=false"
    assert request.method == "POST"
    assert request.content == b'{"text": "hello"}'
    assert request.headers["content-type"] == "application/json"
    assert "cookie" not in request.headers

    assert response.status_code == 200
    assert response.content == b'{"reply":"Hi there"}'
    assert "content-length" not in response.headers


@pytest.mark.asyncio
async def test_forward_passes_agent_errors_through():
    seen: list[httpx.Request] = []
    gateway = _gateway(_recording_transport(seen, status_code=404, text="no such agent"))

    response = await gateway.forward("abc", "GET", "state")

    assert response.status_code == 404
    assert response.content == b"no such agent"
    assert str(seen[0].url) == "http://agent.test/agents/chat/abc/state"


@pytest.mark.asyncio
async def test_forward_without_base_url_is_unavailable():
    gateway = HttpChatAgentGateway("")

    with pytest.raises(ChatAgentError) as exc_info:
        await gateway.forward("abc", "GET", "state")

    assert exc_info.value.status_code == 503


@pytest.mark.asyncio
async def test_transport_failure_becomes_bad_gateway():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    gateway = _gateway(httpx.MockTransport(handler))

    with pytest.raises(ChatAgentError) as exc_info:
        await gateway.forward("abc", "POST", "message", body=b"{}")

    assert exc_info.value.status_code == 502
