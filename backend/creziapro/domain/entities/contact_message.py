"""Domain entity for messages submitted through the public contact form."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ContactMessage:
    id: str
    name: str
    email: str
    message: str
    timestamp: int
    read: bool = False
