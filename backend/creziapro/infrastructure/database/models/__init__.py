from .kv_entry import KeyValueEntryModel

__all__ = [
    "KeyValueEntryModel",
]
