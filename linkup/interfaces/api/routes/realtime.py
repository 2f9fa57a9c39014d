"""Websocket endpoint carrying messages, read receipts and notifications."""

from __future__ import annotations

import json
import logging

from fastapi import APIRouter, HTTPException, WebSocket, WebSocketDisconnect, status
from starlette.concurrency import run_in_threadpool

from linkup.application.use_cases.messages import broadcast_read_receipt, deliver_message
from linkup.domain.entities import User
from linkup.infrastructure.database import SessionLocal
from linkup.infrastructure.realtime import EVENT_ERROR, EVENT_PONG, RealtimeHub
from linkup.interfaces.api.dependencies import resolve_current_user
from linkup.interfaces.api.schemas import (
    InvalidRealtimeEvent,
    JoinEvent,
    LogoutEvent,
    PingEvent,
    ReadMessagesEvent,
    RealtimeEvent,
    SendMessageEvent,
    parse_realtime_event,
)

router = APIRouter(tags=["realtime"])
logger = logging.getLogger(__name__)

MALFORMED_EVENT = "Malformed event"
FORBIDDEN_EVENT = "User id does not match the authenticated user"


def _authenticate(token: str) -> User:
    session = SessionLocal()
    try:
        return resolve_current_user(token, session)
    finally:
        session.close()


def _acting_user_id(event: RealtimeEvent) -> int | None:
    """Return the user id ``event`` claims to act as."""

    if isinstance(event, (JoinEvent, LogoutEvent)):
        return event.data.user_id
    if isinstance(event, SendMessageEvent):
        return event.data.sender_id
    if isinstance(event, ReadMessagesEvent):
        # The reader is the receiver of the messages being acknowledged.
        return event.data.receiver_id
    return None


async def _dispatch(hub: RealtimeHub, websocket: WebSocket, event: RealtimeEvent) -> None:
    if isinstance(event, JoinEvent):
        hub.registry.join(websocket, event.data.user_id)
    elif isinstance(event, SendMessageEvent):
        await deliver_message(
            hub.fanout,
            websocket,
            sender_id=event.data.sender_id,
            receiver_id=event.data.receiver_id,
            content=event.data.content,
        )
    elif isinstance(event, ReadMessagesEvent):
        await broadcast_read_receipt(
            hub.fanout,
            sender_id=event.data.sender_id,
            reader_id=event.data.receiver_id,
        )
    elif isinstance(event, LogoutEvent):
        logger.info("User %s logged out on connection %s", event.data.user_id, id(websocket))
        hub.registry.leave(websocket)
    elif isinstance(event, PingEvent):
        await hub.fanout.send(websocket, EVENT_PONG, {})


async def _receive_frame(websocket: WebSocket) -> str | None:
    """Return the next text frame, or ``None`` for a binary one."""

    message = await websocket.receive()
    if message["type"] == "websocket.disconnect":
        raise WebSocketDisconnect(message.get("code", status.WS_1000_NORMAL_CLOSURE))
    return message.get("text")


@router.websocket("/ws")
async def realtime_websocket(websocket: WebSocket) -> None:
    """Serve one authenticated client connection until the transport closes.

    The bearer token travels in the ``token`` query parameter. The client then
    announces itself with a ``join`` event; from then on the connection
    receives everything addressed to that user's room. Events acting on behalf
    of another user are answered with an ``error`` event.
    """

    token = websocket.query_params.get("token")
    if not token:
        await websocket.close(code=status.WS_1008_POLICY_VIOLATION)
        return
    try:
        user = await run_in_threadpool(_authenticate, token)
    except HTTPException:
        await websocket.close(code=status.WS_1008_POLICY_VIOLATION)
        return

    hub: RealtimeHub = websocket.app.state.realtime
    await websocket.accept()
    logger.info("Socket connected for user %s: %s", user.id, id(websocket))
    try:
        while True:
            frame = await _receive_frame(websocket)
            if frame is None:
                await hub.fanout.send(websocket, EVENT_ERROR, {"message": MALFORMED_EVENT})
                continue
            try:
                event = parse_realtime_event(json.loads(frame))
            except InvalidRealtimeEvent as exc:
                await hub.fanout.send(websocket, EVENT_ERROR, {"message": str(exc)})
                continue
            except ValueError:
                await hub.fanout.send(websocket, EVENT_ERROR, {"message": MALFORMED_EVENT})
                continue
            acting_user_id = _acting_user_id(event)
            if acting_user_id is not None and acting_user_id != user.id:
                logger.warning(
                    "User %s sent %s on behalf of user %s", user.id, event.type, acting_user_id
                )
                await hub.fanout.send(websocket, EVENT_ERROR, {"message": FORBIDDEN_EVENT})
                continue
            await _dispatch(hub, websocket, event)
    except WebSocketDisconnect:
        pass
    finally:
        hub.registry.leave(websocket)
        logger.info("Socket disconnected: %s", id(websocket))
