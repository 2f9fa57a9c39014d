"""Decide whether a message opens a new conversation."""

from __future__ import annotations

from typing import Final

from sqlalchemy.orm import Session

from linkup.infrastructure.repositories import MessageRepository

# A pair that exchanged at most this many earlier messages is still "new".
NEW_CONVERSATION_MAX_PRIOR: Final[int] = 1


def is_new_conversation(
    session: Session,
    user_a: int,
    user_b: int,
    *,
    exclude_message_id: int | None = None,
) -> bool:
    """Return ``True`` when ``user_a`` and ``user_b`` barely talked before.

    Messages in both directions count. ``exclude_message_id`` leaves the
    just-inserted message out, so the first and second message of a pair
    both report a new conversation. Only up to
    ``NEW_CONVERSATION_MAX_PRIOR + 1`` rows are read.
    """

    prior = MessageRepository(session).count_between(
        user_a,
        user_b,
        exclude_id=exclude_message_id,
        limit=NEW_CONVERSATION_MAX_PRIOR + 1,
    )
    return prior <= NEW_CONVERSATION_MAX_PRIOR
