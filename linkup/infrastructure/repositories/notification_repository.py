"""Persistence helpers for notification entities."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from linkup.domain.entities import Notification
from linkup.infrastructure.models import NotificationModel
from linkup.utils import ensure_app_naive_datetime, ensure_app_timezone


class NotificationRepository:
    """Provide create, list and read-state operations for notifications."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_for_user(
        self,
        user_id: int,
        *,
        limit: int | None = None,
    ) -> Sequence[Notification]:
        query = (
            self.session.query(NotificationModel)
            .filter(NotificationModel.user_id == user_id)
            .order_by(
                NotificationModel.created_at.desc(), NotificationModel.id.desc()
            )
        )
        if limit is not None:
            query = query.limit(limit)
        return [self._to_entity(model) for model in query.all()]

    def get(self, notification_id: int) -> Notification | None:
        model = self.session.get(NotificationModel, notification_id)
        return self._to_entity(model) if model else None

    def create(self, notification: Notification) -> Notification:
        model = NotificationModel(
            user_id=notification.user_id,
            type=notification.type,
            message=notification.message,
            from_user_id=notification.from_user_id,
            post_id=notification.post_id,
            comment_id=notification.comment_id,
            is_read=notification.is_read,
        )
        if notification.created_at is not None:
            model.created_at = ensure_app_naive_datetime(notification.created_at)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def mark_as_read(self, notification_id: int, *, user_id: int) -> int:
        updated = (
            self.session.query(NotificationModel)
            .filter(
                NotificationModel.id == notification_id,
                NotificationModel.user_id == user_id,
            )
            .update({NotificationModel.is_read: True}, synchronize_session=False)
        )
        self.session.commit()
        return updated

    def mark_all_as_read(self, user_id: int) -> int:
        updated = (
            self.session.query(NotificationModel)
            .filter(
                NotificationModel.user_id == user_id,
                NotificationModel.is_read.is_(False),
            )
            .update({NotificationModel.is_read: True}, synchronize_session=False)
        )
        self.session.commit()
        return updated

    @staticmethod
    def _to_entity(model: NotificationModel) -> Notification:
        return Notification(
            id=model.id,
            user_id=model.user_id,
            type=model.type,
            message=model.message,
            from_user_id=model.from_user_id,
            post_id=model.post_id,
            comment_id=model.comment_id,
            is_read=bool(model.is_read),
            created_at=ensure_app_timezone(model.created_at),
        )


__all__ = ["NotificationRepository"]
