"""Domain entity representing a user notification."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Final

NOTIFICATION_TYPE_MESSAGE: Final[str] = "message"
NOTIFICATION_TYPE_COMMENT: Final[str] = "comment"
NOTIFICATION_TYPE_LIKE: Final[str] = "like"
NOTIFICATION_TYPE_FRIEND_REQUEST: Final[str] = "friend_request"
NOTIFICATION_TYPE_FRIEND_ACCEPTED: Final[str] = "friend_accepted"

NOTIFICATION_TYPES: Final[frozenset[str]] = frozenset(
    {
        NOTIFICATION_TYPE_MESSAGE,
        NOTIFICATION_TYPE_COMMENT,
        NOTIFICATION_TYPE_LIKE,
        NOTIFICATION_TYPE_FRIEND_REQUEST,
        NOTIFICATION_TYPE_FRIEND_ACCEPTED,
    }
)


@dataclass
class Notification:
    """Information message delivered to a specific user."""

    id: int | None
    user_id: int
    type: str
    message: str
    from_user_id: int | None = None
    post_id: int | None = None
    comment_id: int | None = None
    is_read: bool = False
    created_at: datetime | None = None


__all__ = [
    "NOTIFICATION_TYPES",
    "NOTIFICATION_TYPE_COMMENT",
    "NOTIFICATION_TYPE_FRIEND_ACCEPTED",
    "NOTIFICATION_TYPE_FRIEND_REQUEST",
    "NOTIFICATION_TYPE_LIKE",
    "NOTIFICATION_TYPE_MESSAGE",
    "Notification",
]
