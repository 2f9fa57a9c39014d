"""Use case for reading message history."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from linkup.domain.entities import Message
from linkup.infrastructure.repositories import MessageRepository

ALL_CONTACTS = 0


def list_messages(session: Session, user_id: int, contact_id: int) -> Sequence[Message]:
    """Return the conversation with ``contact_id`` in chronological order.

    ``contact_id == ALL_CONTACTS`` returns every message ``user_id`` sent or
    received.
    """

    repository = MessageRepository(session)
    if contact_id == ALL_CONTACTS:
        return repository.list_for_user(user_id)
    return repository.list_between(user_id, contact_id)
