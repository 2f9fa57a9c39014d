"""Domain entity representing a direct message."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Message:
    """Text sent from one user to another."""

    id: int | None
    sender_id: int
    receiver_id: int
    content: str
    timestamp: datetime | None = None
    is_read: bool = False


@dataclass(frozen=True)
class SentMessage:
    """A persisted message together with its conversation status."""

    message: Message
    is_new_conversation: bool


__all__ = ["Message", "SentMessage"]
