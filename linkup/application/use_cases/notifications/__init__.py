"""Public helpers for emitting domain notifications."""

from .events import (
    create_notification,
    notify_friend_accepted,
    notify_friend_request,
    notify_post_commented,
    notify_post_liked,
)
from .read_state import (
    list_notifications,
    mark_all_notifications_read,
    mark_notification_read,
)

__all__ = [
    "create_notification",
    "list_notifications",
    "mark_all_notifications_read",
    "mark_notification_read",
    "notify_friend_accepted",
    "notify_friend_request",
    "notify_post_commented",
    "notify_post_liked",
]
