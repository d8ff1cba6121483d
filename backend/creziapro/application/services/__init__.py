from .chat_session_service import derive_session_title
from .record_store import RecordStore, Namespace, SITE_SETTINGS_KEY

__all__ = [
    "derive_session_title",
    "RecordStore",
    "Namespace",
    "SITE_SETTINGS_KEY",
]
