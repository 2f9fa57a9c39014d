"""Persistence helpers for direct messages."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import and_, or_
from sqlalchemy.orm import Session

from linkup.domain.entities import Message
from linkup.infrastructure.models import MessageModel
from linkup.utils import ensure_app_timezone


class MessageRepository:
    """Append-only access to the ``messages`` table."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def create(self, *, sender_id: int, receiver_id: int, content: str) -> Message:
        model = MessageModel(
            sender_id=sender_id,
            receiver_id=receiver_id,
            content=content,
            is_read=False,
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def get(self, message_id: int) -> Message | None:
        model = self.session.get(MessageModel, message_id)
        return self._to_entity(model) if model else None

    def list_between(self, user_id: int, contact_id: int) -> Sequence[Message]:
        query = (
            self.session.query(MessageModel)
            .filter(self._pair_clause(user_id, contact_id))
            .order_by(MessageModel.timestamp.asc(), MessageModel.id.asc())
        )
        return [self._to_entity(model) for model in query.all()]

    def list_for_user(self, user_id: int) -> Sequence[Message]:
        query = (
            self.session.query(MessageModel)
            .filter(
                or_(
                    MessageModel.sender_id == user_id,
                    MessageModel.receiver_id == user_id,
                )
            )
            .order_by(MessageModel.timestamp.asc(), MessageModel.id.asc())
        )
        return [self._to_entity(model) for model in query.all()]

    def count_between(
        self,
        user_a: int,
        user_b: int,
        *,
        exclude_id: int | None = None,
        limit: int | None = None,
    ) -> int:
        """Count messages exchanged by the pair in either direction.

        ``limit`` caps the rows fetched when the caller only needs to know
        whether the count stays under a small threshold.
        """

        query = self.session.query(MessageModel.id).filter(
            self._pair_clause(user_a, user_b)
        )
        if exclude_id is not None:
            query = query.filter(MessageModel.id != exclude_id)
        if limit is not None:
            query = query.limit(limit)
        return len(query.all())

    def mark_as_read(self, *, sender_id: int, receiver_id: int) -> int:
        """Flag every unread message from ``sender_id`` to ``receiver_id`` as read."""

        updated = (
            self.session.query(MessageModel)
            .filter(
                MessageModel.sender_id == sender_id,
                MessageModel.receiver_id == receiver_id,
                MessageModel.is_read.is_(False),
            )
            .update({MessageModel.is_read: True}, synchronize_session=False)
        )
        self.session.commit()
        return updated

    @staticmethod
    def _pair_clause(user_a: int, user_b: int):
        return or_(
            and_(MessageModel.sender_id == user_a, MessageModel.receiver_id == user_b),
            and_(MessageModel.sender_id == user_b, MessageModel.receiver_id == user_a),
        )

    @staticmethod
    def _to_entity(model: MessageModel) -> Message:
        return Message(
            id=model.id,
            sender_id=model.sender_id,
            receiver_id=model.receiver_id,
            content=model.content,
            timestamp=ensure_app_timezone(model.timestamp),
            is_read=bool(model.is_read),
        )


__all__ = ["MessageRepository"]
