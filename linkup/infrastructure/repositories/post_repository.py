"""Persistence helpers for posts and their media."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from sqlalchemy import func
from sqlalchemy.orm import Session

from linkup.domain.entities import Post, PostMedia
from linkup.infrastructure.models import (
    CommentModel,
    LikeModel,
    PostMediaModel,
    PostModel,
)
from linkup.utils import ensure_app_timezone


class PostRepository:
    """Provide CRUD operations for :class:`Post` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list(self, *, user_id: int | None = None) -> Sequence[Post]:
        query = self.session.query(PostModel)
        if user_id is not None:
            query = query.filter(PostModel.user_id == user_id)
        query = query.order_by(PostModel.created_at.desc(), PostModel.id.desc())
        return self._to_entities(query.all())

    def list_liked_by(self, user_id: int) -> Sequence[Post]:
        query = (
            self.session.query(PostModel)
            .join(LikeModel, LikeModel.post_id == PostModel.id)
            .filter(LikeModel.user_id == user_id)
            .order_by(LikeModel.created_at.desc(), LikeModel.id.desc())
        )
        return self._to_entities(query.all())

    def get(self, post_id: int) -> Post | None:
        model = self.session.get(PostModel, post_id)
        if model is None:
            return None
        return self._to_entities([model])[0]

    def get_owner_id(self, post_id: int) -> int | None:
        row = (
            self.session.query(PostModel.user_id)
            .filter(PostModel.id == post_id)
            .first()
        )
        return row[0] if row else None

    def create(self, *, user_id: int, content: str, media: Iterable[PostMedia] = ()) -> Post:
        model = PostModel(user_id=user_id, content=content)
        model.media = [PostMediaModel(url=item.url, type=item.type) for item in media]
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entities([model])[0]

    def update_content(self, post_id: int, content: str) -> Post:
        model = self.session.get(PostModel, post_id)
        if model is None:
            msg = f"Post with id {post_id} not found"
            raise ValueError(msg)
        model.content = content
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entities([model])[0]

    def delete(self, post_id: int) -> None:
        """Remove the post together with its likes, comments and media."""

        self.session.query(LikeModel).filter(LikeModel.post_id == post_id).delete(
            synchronize_session=False
        )
        self.session.query(CommentModel).filter(CommentModel.post_id == post_id).delete(
            synchronize_session=False
        )
        self.session.query(PostMediaModel).filter(
            PostMediaModel.post_id == post_id
        ).delete(synchronize_session=False)
        self.session.query(PostModel).filter(PostModel.id == post_id).delete(
            synchronize_session=False
        )
        self.session.commit()

    def _like_counts(self, post_ids: Sequence[int]) -> dict[int, int]:
        if not post_ids:
            return {}
        rows = (
            self.session.query(LikeModel.post_id, func.count(LikeModel.id))
            .filter(LikeModel.post_id.in_(post_ids))
            .group_by(LikeModel.post_id)
            .all()
        )
        return {post_id: count for post_id, count in rows}

    def _to_entities(self, models: Sequence[PostModel]) -> list[Post]:
        counts = self._like_counts([model.id for model in models])
        return [self._to_entity(model, counts.get(model.id, 0)) for model in models]

    @staticmethod
    def _to_entity(model: PostModel, like_count: int) -> Post:
        author = model.author
        author_name = (
            f"{author.first_name} {author.last_name}".strip() if author else None
        )
        return Post(
            id=model.id,
            user_id=model.user_id,
            content=model.content,
            media=[PostMedia(url=item.url, type=item.type) for item in model.media],
            author_name=author_name,
            like_count=like_count,
            created_at=ensure_app_timezone(model.created_at),
            updated_at=ensure_app_timezone(model.updated_at),
        )


__all__ = ["PostRepository"]
