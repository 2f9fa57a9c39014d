"""Domain entities describing posts and their attachments."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

MEDIA_TYPE_IMAGE = "image"
MEDIA_TYPE_VIDEO = "video"


@dataclass
class PostMedia:
    """Externally hosted file attached to a post."""

    url: str
    type: str = MEDIA_TYPE_IMAGE


@dataclass
class Post:
    """Content published by a user on the feed."""

    id: int | None
    user_id: int
    content: str
    media: list[PostMedia] = field(default_factory=list)
    author_name: str | None = None
    like_count: int = 0
    created_at: datetime | None = None
    updated_at: datetime | None = None


__all__ = ["MEDIA_TYPE_IMAGE", "MEDIA_TYPE_VIDEO", "Post", "PostMedia"]
