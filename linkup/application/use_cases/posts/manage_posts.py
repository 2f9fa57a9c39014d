"""Use cases for publishing and editing posts."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from sqlalchemy.orm import Session

from linkup.domain.entities import MEDIA_TYPE_IMAGE, MEDIA_TYPE_VIDEO, Post, PostMedia
from linkup.infrastructure.repositories import PostRepository

from ..errors import NotFoundError

_MEDIA_TYPES = frozenset({MEDIA_TYPE_IMAGE, MEDIA_TYPE_VIDEO})


def _require_content(content: str) -> str:
    if not content or not content.strip():
        raise ValueError("Content is required")
    return content


def create_post(
    session: Session,
    *,
    user_id: int,
    content: str,
    media: Iterable[PostMedia] = (),
) -> Post:
    """Publish a post with optional externally hosted media."""

    attachments = list(media)
    for item in attachments:
        if item.type not in _MEDIA_TYPES:
            raise ValueError(f"Unsupported media type '{item.type}'")
    return PostRepository(session).create(
        user_id=user_id, content=_require_content(content), media=attachments
    )


def list_posts(session: Session, *, user_id: int | None = None) -> Sequence[Post]:
    return PostRepository(session).list(user_id=user_id)


def get_post(session: Session, post_id: int) -> Post:
    post = PostRepository(session).get(post_id)
    if post is None:
        raise NotFoundError("Post not found")
    return post


def _get_owned_post(session: Session, post_id: int, user_id: int) -> Post:
    post = get_post(session, post_id)
    if post.user_id != user_id:
        raise PermissionError("Only the author can modify this post")
    return post


def update_post(session: Session, post_id: int, *, user_id: int, content: str) -> Post:
    _get_owned_post(session, post_id, user_id)
    return PostRepository(session).update_content(post_id, _require_content(content))


def delete_post(session: Session, post_id: int, *, user_id: int) -> None:
    """Delete the post and its likes, comments and media."""

    _get_owned_post(session, post_id, user_id)
    PostRepository(session).delete(post_id)
