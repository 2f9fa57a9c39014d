"""Utility helpers to generate and dispatch domain notifications."""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from linkup.domain.entities import (
    NOTIFICATION_TYPE_COMMENT,
    NOTIFICATION_TYPE_FRIEND_ACCEPTED,
    NOTIFICATION_TYPE_FRIEND_REQUEST,
    NOTIFICATION_TYPE_LIKE,
    NOTIFICATION_TYPES,
    Notification,
)
from linkup.infrastructure.realtime import (
    EVENT_NOTIFICATION,
    RealtimeEventPublisher,
    serialize_notification,
)
from linkup.infrastructure.repositories import NotificationRepository, UserRepository
from linkup.utils import now_in_app_timezone

logger = logging.getLogger(__name__)

_UNKNOWN_USER_NAME = "Someone"


def create_notification(
    session: Session,
    publisher: RealtimeEventPublisher,
    *,
    user_id: int,
    type: str,
    message: str,
    from_user_id: int | None = None,
    post_id: int | None = None,
    comment_id: int | None = None,
) -> Notification:
    """Persist a notification and push it to the owner's live connections.

    Store failures propagate to the caller and nothing is pushed.
    """

    if type not in NOTIFICATION_TYPES:
        raise ValueError("Invalid notification type")
    if not message or not message.strip():
        raise ValueError("Missing required fields")

    notification = Notification(
        id=None,
        user_id=user_id,
        type=type,
        message=message,
        from_user_id=from_user_id,
        post_id=post_id,
        comment_id=comment_id,
        is_read=False,
        created_at=now_in_app_timezone(),
    )
    saved = NotificationRepository(session).create(notification)
    publisher.dispatch(saved.user_id, EVENT_NOTIFICATION, serialize_notification(saved))
    logger.debug("Notification %s (%s) created for user %s", saved.id, saved.type, saved.user_id)
    return saved


def _display_name(session: Session, user_id: int) -> str:
    return UserRepository(session).get_display_name(user_id) or _UNKNOWN_USER_NAME


def notify_post_liked(
    session: Session,
    publisher: RealtimeEventPublisher,
    *,
    post_id: int,
    post_owner_id: int,
    liker_id: int,
) -> Notification | None:
    """Tell the post owner that someone else liked the post."""

    if post_owner_id == liker_id:
        return None
    return create_notification(
        session,
        publisher,
        user_id=post_owner_id,
        type=NOTIFICATION_TYPE_LIKE,
        message=f"{_display_name(session, liker_id)} liked your post.",
        from_user_id=liker_id,
        post_id=post_id,
    )


def notify_post_commented(
    session: Session,
    publisher: RealtimeEventPublisher,
    *,
    post_id: int,
    post_owner_id: int,
    comment_id: int,
    commenter_id: int,
) -> Notification | None:
    """Tell the post owner that someone else commented on the post."""

    if post_owner_id == commenter_id:
        return None
    return create_notification(
        session,
        publisher,
        user_id=post_owner_id,
        type=NOTIFICATION_TYPE_COMMENT,
        message=f"{_display_name(session, commenter_id)} commented on your post.",
        from_user_id=commenter_id,
        post_id=post_id,
        comment_id=comment_id,
    )


def notify_friend_request(
    session: Session,
    publisher: RealtimeEventPublisher,
    *,
    sender_id: int,
    receiver_id: int,
) -> Notification:
    return create_notification(
        session,
        publisher,
        user_id=receiver_id,
        type=NOTIFICATION_TYPE_FRIEND_REQUEST,
        message=f"{_display_name(session, sender_id)} sent you a friend request.",
        from_user_id=sender_id,
    )


def notify_friend_accepted(
    session: Session,
    publisher: RealtimeEventPublisher,
    *,
    sender_id: int,
    receiver_id: int,
) -> Notification:
    """Tell the original requester that ``receiver_id`` accepted."""

    return create_notification(
        session,
        publisher,
        user_id=sender_id,
        type=NOTIFICATION_TYPE_FRIEND_ACCEPTED,
        message=f"{_display_name(session, receiver_id)} accepted your friend request.",
        from_user_id=receiver_id,
    )
