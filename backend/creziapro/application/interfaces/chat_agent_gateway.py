"""Abstract gateway to the external conversational agent (port)."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field


@dataclass
class AgentResponse:
    """Raw reply relayed back from the chat agent."""

    status_code: int
    content: bytes
    headers: dict[str, str] = field(default_factory=dict)


class ChatAgentGateway(ABC):
    """Port — forwards chat turns to the agent that owns a session.

    The agent is addressed by session id; its conversation state and
    model calls are opaque to this service.
    """

    @abstractmethod
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
        """Relay one request to the agent and return its reply.

        Raises:
            ChatAgentError: The agent is unreachable or not configured.
        """
        ...
