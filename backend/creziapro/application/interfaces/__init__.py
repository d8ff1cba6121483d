from .admin_authenticator import AdminAuthenticator
from .chat_agent_gateway import AgentResponse, ChatAgentGateway
from .key_value_storage import KeyValueStorage

__all__ = [
    "AdminAuthenticator",
    "AgentResponse",
    "ChatAgentGateway",
    "KeyValueStorage",
]
