"""Domain-specific exceptions — framework-independent."""


class StorageError(Exception):
    """Raised when the durable key-value medium rejects a read or write.

    The record store never retries; the in-memory mirror is left as it was
    before the failed operation.
    """

    def __init__(self, operation: str, key: str, message: str):
        self.operation = operation
        self.key = key
        self.message = message
        super().__init__(f"storage {operation} failed for '{key}': {message}")


class ChatAgentError(Exception):
    """Raised when the external chat agent can not be reached."""

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        self.message = message
        super().__init__(f"[chat-agent] {status_code}: {message}")
