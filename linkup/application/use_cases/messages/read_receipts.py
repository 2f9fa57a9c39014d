"""Read state of direct messages."""

from __future__ import annotations

from sqlalchemy.orm import Session

from linkup.infrastructure.realtime import EVENT_MESSAGES_READ, EventFanout
from linkup.infrastructure.repositories import MessageRepository


def mark_messages_read(session: Session, *, sender_id: int, receiver_id: int) -> int:
    """Flag every unread message from ``sender_id`` to ``receiver_id`` as read.

    Running it again is a no-op; the number of newly flagged rows is returned.
    """

    return MessageRepository(session).mark_as_read(
        sender_id=sender_id, receiver_id=receiver_id
    )


async def broadcast_read_receipt(
    fanout: EventFanout, *, sender_id: int, reader_id: int
) -> int:
    """Tell ``sender_id`` that ``reader_id`` read their messages.

    Nothing is persisted here; see :func:`mark_messages_read`.
    """

    return await fanout.emit_to_user(sender_id, EVENT_MESSAGES_READ, {"by": reader_id})
