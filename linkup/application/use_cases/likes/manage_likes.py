"""Use cases for liking posts."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from linkup.domain.entities import Post
from linkup.infrastructure.realtime import RealtimeEventPublisher
from linkup.infrastructure.repositories import (
    DuplicateLikeError,
    LikeRepository,
    PostRepository,
)

from ..errors import ConflictError, NotFoundError
from ..notifications import notify_post_liked


def like_post(
    session: Session,
    publisher: RealtimeEventPublisher,
    *,
    post_id: int,
    user_id: int,
) -> None:
    """Record the like and notify the author when it is somebody else."""

    owner_id = PostRepository(session).get_owner_id(post_id)
    if owner_id is None:
        raise NotFoundError("Post not found")

    repository = LikeRepository(session)
    if repository.exists(post_id=post_id, user_id=user_id):
        raise ConflictError("Post already liked")
    try:
        repository.create(post_id=post_id, user_id=user_id)
    except DuplicateLikeError as exc:
        raise ConflictError(str(exc)) from exc

    notify_post_liked(
        session, publisher, post_id=post_id, post_owner_id=owner_id, liker_id=user_id
    )


def unlike_post(session: Session, *, post_id: int, user_id: int) -> None:
    LikeRepository(session).delete(post_id=post_id, user_id=user_id)


def is_post_liked(session: Session, *, post_id: int, user_id: int) -> bool:
    return LikeRepository(session).exists(post_id=post_id, user_id=user_id)


def list_liked_posts(session: Session, user_id: int) -> Sequence[Post]:
    """Return the posts liked by ``user_id``, most recent like first."""

    return PostRepository(session).list_liked_by(user_id)
