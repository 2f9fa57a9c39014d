"""Realtime delivery of domain events to websocket clients."""

from __future__ import annotations

from dataclasses import dataclass

from .fanout import EventFanout, RealtimeConnection, build_envelope
from .publisher import RealtimeEventPublisher
from .rooms import ROOM_PREFIX, RoomRegistry, room_name
from .serializers import serialize_message, serialize_notification

EVENT_RECEIVE_MESSAGE = "receiveMessage"
EVENT_MESSAGE_SENT = "messageSent"
EVENT_NEW_CONVERSATION = "newConversation"
EVENT_MESSAGES_READ = "messagesRead"
EVENT_NOTIFICATION = "notification"
EVENT_ERROR = "error"
EVENT_PONG = "pong"


@dataclass(frozen=True)
class RealtimeHub:
    """The registry, fan-out engine and publisher of one application instance."""

    registry: RoomRegistry
    fanout: EventFanout
    publisher: RealtimeEventPublisher


def create_realtime_hub() -> RealtimeHub:
    """Build a fresh registry and wire the delivery helpers to it."""

    registry = RoomRegistry()
    fanout = EventFanout(registry)
    return RealtimeHub(
        registry=registry,
        fanout=fanout,
        publisher=RealtimeEventPublisher(fanout),
    )


__all__ = [
    "EVENT_ERROR",
    "EVENT_MESSAGES_READ",
    "EVENT_MESSAGE_SENT",
    "EVENT_NEW_CONVERSATION",
    "EVENT_NOTIFICATION",
    "EVENT_PONG",
    "EVENT_RECEIVE_MESSAGE",
    "EventFanout",
    "ROOM_PREFIX",
    "RealtimeConnection",
    "RealtimeEventPublisher",
    "RealtimeHub",
    "RoomRegistry",
    "build_envelope",
    "create_realtime_hub",
    "room_name",
    "serialize_message",
    "serialize_notification",
]
