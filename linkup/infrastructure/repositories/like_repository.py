"""Persistence helpers for post likes."""

from __future__ import annotations

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from linkup.infrastructure.models import LikeModel


class DuplicateLikeError(Exception):
    """Raised when a user likes the same post twice."""


class LikeRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def exists(self, *, post_id: int, user_id: int) -> bool:
        query = self.session.query(LikeModel.id).filter(
            LikeModel.post_id == post_id, LikeModel.user_id == user_id
        )
        return query.first() is not None

    def create(self, *, post_id: int, user_id: int) -> None:
        self.session.add(LikeModel(post_id=post_id, user_id=user_id))
        try:
            self.session.commit()
        except IntegrityError as exc:
            self.session.rollback()
            raise DuplicateLikeError("Post already liked") from exc

    def delete(self, *, post_id: int, user_id: int) -> int:
        deleted = (
            self.session.query(LikeModel)
            .filter(LikeModel.post_id == post_id, LikeModel.user_id == user_id)
            .delete(synchronize_session=False)
        )
        self.session.commit()
        return deleted


__all__ = ["DuplicateLikeError", "LikeRepository"]
