"""Domain entity representing a comment on a post."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Comment:
    id: int | None
    post_id: int
    user_id: int
    content: str
    author_name: str | None = None
    created_at: datetime | None = None


__all__ = ["Comment"]
