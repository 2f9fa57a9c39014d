"""Listing notifications and tracking their read state."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from linkup.domain.entities import Notification
from linkup.infrastructure.repositories import NotificationRepository

from ..errors import NotFoundError


def list_notifications(session: Session, user_id: int) -> Sequence[Notification]:
    """Return every notification of ``user_id``, newest first."""

    return NotificationRepository(session).list_for_user(user_id)


def mark_notification_read(session: Session, notification_id: int, *, user_id: int) -> None:
    repository = NotificationRepository(session)
    notification = repository.get(notification_id)
    if notification is None or notification.user_id != user_id:
        raise NotFoundError("Notification not found")
    repository.mark_as_read(notification_id, user_id=user_id)


def mark_all_notifications_read(session: Session, user_id: int) -> int:
    return NotificationRepository(session).mark_all_as_read(user_id)
