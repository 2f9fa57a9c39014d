"""Use case for customizing a user's profile."""

from __future__ import annotations

from dataclasses import replace
from typing import Any

from sqlalchemy.orm import Session

from linkup.domain.entities import User
from linkup.infrastructure.repositories import UserRepository

from ..errors import NotFoundError

PROFILE_FIELDS = frozenset(
    {
        "about_me",
        "background_color",
        "bio",
        "links",
        "theme_song_url",
        "theme_song_title",
    }
)


def update_profile(session: Session, user_id: int, changes: dict[str, Any]) -> User:
    """Apply the provided profile ``changes`` to ``user_id``.

    Only keys present in ``changes`` are written; ``None`` clears a field.
    """

    updates = {key: value for key, value in changes.items() if key in PROFILE_FIELDS}
    if not updates:
        raise ValueError("No fields provided to update.")

    if "links" in updates and updates["links"] is None:
        updates["links"] = []

    repository = UserRepository(session)
    user = repository.get(user_id)
    if user is None:
        raise NotFoundError("User not found")

    return repository.update(replace(user, **updates))
