"""Use cases for commenting on posts."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from linkup.domain.entities import Comment
from linkup.infrastructure.realtime import RealtimeEventPublisher
from linkup.infrastructure.repositories import CommentRepository, PostRepository

from ..errors import NotFoundError
from ..notifications import notify_post_commented


def add_comment(
    session: Session,
    publisher: RealtimeEventPublisher,
    *,
    post_id: int,
    user_id: int,
    content: str,
) -> Comment:
    """Store the comment and notify the post author."""

    if not content or not content.strip():
        raise ValueError("Content is required")

    owner_id = PostRepository(session).get_owner_id(post_id)
    if owner_id is None:
        raise NotFoundError("Post not found")

    comment = CommentRepository(session).create(
        post_id=post_id, user_id=user_id, content=content
    )
    notify_post_commented(
        session,
        publisher,
        post_id=post_id,
        post_owner_id=owner_id,
        comment_id=comment.id,
        commenter_id=user_id,
    )
    return comment


def list_comments(session: Session, post_id: int) -> Sequence[Comment]:
    return CommentRepository(session).list_for_post(post_id)
