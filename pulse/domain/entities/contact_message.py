"""Domain entity representing a message sent through the contact form."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class ContactMessage:
    id: int | None
    name: str
    email: str
    subject: str
    message: str
    read: bool = False
    created_at: datetime | None = None


__all__ = ["ContactMessage"]
