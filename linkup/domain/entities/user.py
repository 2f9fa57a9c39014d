"""Domain entity representing a user."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class User:
    """Core attributes describing a member of the network."""

    id: int | None
    first_name: str
    last_name: str
    username: str
    email: str
    password: str
    bio: str | None = None
    about_me: str | None = None
    background_color: str | None = None
    links: list[str] = field(default_factory=list)
    theme_song_url: str | None = None
    theme_song_title: str | None = None
    created_at: datetime | None = None


__all__ = ["User"]
