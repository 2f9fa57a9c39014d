"""Persistence helpers for friend requests."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import and_, or_
from sqlalchemy.orm import Session

from linkup.domain.entities import (
    FRIEND_REQUEST_ACCEPTED,
    FRIEND_REQUEST_PENDING,
    FriendRequest,
)
from linkup.infrastructure.models import FriendRequestModel
from linkup.utils import ensure_app_timezone


class FriendRequestRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, request_id: int) -> FriendRequest | None:
        model = self.session.get(FriendRequestModel, request_id)
        return self._to_entity(model) if model else None

    def has_pending(self, *, sender_id: int, receiver_id: int) -> bool:
        query = self.session.query(FriendRequestModel.id).filter(
            FriendRequestModel.sender_id == sender_id,
            FriendRequestModel.receiver_id == receiver_id,
            FriendRequestModel.status == FRIEND_REQUEST_PENDING,
        )
        return query.first() is not None

    def list_for_user(self, user_id: int) -> Sequence[FriendRequest]:
        query = (
            self.session.query(FriendRequestModel)
            .filter(
                or_(
                    FriendRequestModel.sender_id == user_id,
                    FriendRequestModel.receiver_id == user_id,
                )
            )
            .order_by(FriendRequestModel.created_at.desc(), FriendRequestModel.id.desc())
        )
        return [self._to_entity(model) for model in query.all()]

    def create(self, *, sender_id: int, receiver_id: int) -> FriendRequest:
        model = FriendRequestModel(
            sender_id=sender_id,
            receiver_id=receiver_id,
            status=FRIEND_REQUEST_PENDING,
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def update_status(self, request_id: int, status: str) -> FriendRequest:
        model = self.session.get(FriendRequestModel, request_id)
        if model is None:
            msg = f"Friend request with id {request_id} not found"
            raise ValueError(msg)
        model.status = status
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def delete_friendship(self, user_id: int, friend_id: int) -> int:
        deleted = (
            self.session.query(FriendRequestModel)
            .filter(
                or_(
                    and_(
                        FriendRequestModel.sender_id == user_id,
                        FriendRequestModel.receiver_id == friend_id,
                    ),
                    and_(
                        FriendRequestModel.sender_id == friend_id,
                        FriendRequestModel.receiver_id == user_id,
                    ),
                ),
                FriendRequestModel.status == FRIEND_REQUEST_ACCEPTED,
            )
            .delete(synchronize_session=False)
        )
        self.session.commit()
        return deleted

    @staticmethod
    def _to_entity(model: FriendRequestModel) -> FriendRequest:
        return FriendRequest(
            id=model.id,
            sender_id=model.sender_id,
            receiver_id=model.receiver_id,
            status=model.status,
            created_at=ensure_app_timezone(model.created_at),
        )


__all__ = ["FriendRequestRepository"]
