"""Persist direct messages and push them to both participants."""

from __future__ import annotations

import logging
from typing import Any, Callable

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from starlette.concurrency import run_in_threadpool

from linkup.domain.entities import Message, SentMessage
from linkup.infrastructure.database import SessionLocal
from linkup.infrastructure.realtime import (
    EVENT_ERROR,
    EVENT_MESSAGE_SENT,
    EVENT_NEW_CONVERSATION,
    EVENT_RECEIVE_MESSAGE,
    EventFanout,
    RealtimeConnection,
    serialize_message,
)
from linkup.infrastructure.repositories import MessageRepository

from .conversation import is_new_conversation

logger = logging.getLogger(__name__)

SEND_FAILED_MESSAGE = "Failed to send message."


def store_message(
    session: Session, *, sender_id: int, receiver_id: int, content: str
) -> Message:
    """Validate and insert a message."""

    if not content or not content.strip():
        raise ValueError("Message content is required")

    return MessageRepository(session).create(
        sender_id=sender_id, receiver_id=receiver_id, content=content
    )


def send_message(
    session: Session, *, sender_id: int, receiver_id: int, content: str
) -> SentMessage:
    """Store a message and report whether it opens a new conversation."""

    message = store_message(
        session, sender_id=sender_id, receiver_id=receiver_id, content=content
    )
    return SentMessage(
        message=message,
        is_new_conversation=is_new_conversation(
            session, sender_id, receiver_id, exclude_message_id=message.id
        ),
    )


def _persist_message(
    session_factory: Callable[[], Session],
    sender_id: int,
    receiver_id: int,
    content: str,
) -> Message:
    session = session_factory()
    try:
        return store_message(
            session, sender_id=sender_id, receiver_id=receiver_id, content=content
        )
    finally:
        session.close()


def _opens_conversation(
    session_factory: Callable[[], Session], message: Message
) -> bool:
    session = session_factory()
    try:
        return is_new_conversation(
            session,
            message.sender_id,
            message.receiver_id,
            exclude_message_id=message.id,
        )
    finally:
        session.close()


async def deliver_message(
    fanout: EventFanout,
    origin: RealtimeConnection,
    *,
    sender_id: int,
    receiver_id: int,
    content: str,
    session_factory: Callable[[], Session] = SessionLocal,
) -> SentMessage | None:
    """Persist a message, then fan it out.

    The receiver and sender rooms get ``receiveMessage``, the originating
    connection gets ``messageSent`` and, for a new conversation, the sender
    room also gets ``newConversation``. When the message cannot be stored
    only ``origin`` hears about it, through an ``error`` event. Once stored,
    the message is always broadcast; if the conversation lookup fails only
    ``newConversation`` is skipped.
    """

    try:
        message = await run_in_threadpool(
            _persist_message, session_factory, sender_id, receiver_id, content
        )
    except ValueError as exc:
        await fanout.send(origin, EVENT_ERROR, {"message": str(exc)})
        return None
    except SQLAlchemyError:
        logger.exception(
            "Message send error from user %s to user %s", sender_id, receiver_id
        )
        await fanout.send(origin, EVENT_ERROR, {"message": SEND_FAILED_MESSAGE})
        return None

    try:
        opens_conversation = await run_in_threadpool(
            _opens_conversation, session_factory, message
        )
    except SQLAlchemyError:
        logger.exception("Conversation lookup failed for message %s", message.id)
        opens_conversation = False

    payload: dict[str, Any] = serialize_message(message)
    await fanout.emit_to_user(receiver_id, EVENT_RECEIVE_MESSAGE, payload)
    await fanout.emit_to_user(sender_id, EVENT_RECEIVE_MESSAGE, payload)
    await fanout.send(origin, EVENT_MESSAGE_SENT, payload)
    if opens_conversation:
        await fanout.emit_to_user(sender_id, EVENT_NEW_CONVERSATION, payload)
    return SentMessage(message=message, is_new_conversation=opens_conversation)
