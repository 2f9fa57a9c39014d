"""Persistence helpers for comments."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from linkup.domain.entities import Comment
from linkup.infrastructure.models import CommentModel
from linkup.utils import ensure_app_timezone


class CommentRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def list_for_post(self, post_id: int) -> Sequence[Comment]:
        query = (
            self.session.query(CommentModel)
            .filter(CommentModel.post_id == post_id)
            .order_by(CommentModel.created_at.asc(), CommentModel.id.asc())
        )
        return [self._to_entity(model) for model in query.all()]

    def create(self, *, post_id: int, user_id: int, content: str) -> Comment:
        model = CommentModel(post_id=post_id, user_id=user_id, content=content)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: CommentModel) -> Comment:
        author = model.author
        return Comment(
            id=model.id,
            post_id=model.post_id,
            user_id=model.user_id,
            content=model.content,
            author_name=f"{author.first_name} {author.last_name}".strip()
            if author
            else None,
            created_at=ensure_app_timezone(model.created_at),
        )


__all__ = ["CommentRepository"]
