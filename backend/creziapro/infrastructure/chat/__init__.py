from .http_chat_agent_gateway import HttpChatAgentGateway

__all__ = ["HttpChatAgentGateway"]
