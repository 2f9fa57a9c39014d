"""JSON payloads pushed to realtime clients."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from linkup.domain.entities import Message, Notification


def _isoformat(value: datetime | None) -> str | None:
    return value.isoformat() if value else None


def serialize_message(message: Message) -> dict[str, Any]:
    """Return the websocket payload representation for ``message``."""

    return {
        "id": message.id,
        "senderId": message.sender_id,
        "receiverId": message.receiver_id,
        "content": message.content,
        "timestamp": _isoformat(message.timestamp),
        "isRead": int(message.is_read),
    }


def serialize_notification(notification: Notification) -> dict[str, Any]:
    """Return the websocket payload representation for ``notification``."""

    return {
        "id": notification.id,
        "userId": notification.user_id,
        "type": notification.type,
        "message": notification.message,
        "fromUserId": notification.from_user_id,
        "postId": notification.post_id,
        "commentId": notification.comment_id,
        "isRead": int(notification.is_read),
        "createdAt": _isoformat(notification.created_at),
    }


__all__ = ["serialize_message", "serialize_notification"]
