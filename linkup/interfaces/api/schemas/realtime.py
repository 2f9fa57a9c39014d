"""Events accepted on the realtime websocket.

Every frame is a ``{"type": ..., "data": {...}}`` envelope. ``type`` selects
the payload model, so each event is validated against its own required
fields before it is dispatched.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError


class _EventData(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class JoinData(_EventData):
    user_id: int = Field(..., alias="userId", ge=1)


class SendMessageData(_EventData):
    sender_id: int = Field(..., alias="senderId", ge=1)
    receiver_id: int = Field(..., alias="receiverId", ge=1)
    content: str = Field(..., min_length=1)


class ReadMessagesData(_EventData):
    sender_id: int = Field(..., alias="senderId", ge=1)
    receiver_id: int = Field(..., alias="receiverId", ge=1)


class LogoutData(_EventData):
    user_id: int = Field(..., alias="userId", ge=1)


class JoinEvent(BaseModel):
    type: Literal["join"]
    data: JoinData


class SendMessageEvent(BaseModel):
    type: Literal["sendMessage"]
    data: SendMessageData


class ReadMessagesEvent(BaseModel):
    type: Literal["readMessages"]
    data: ReadMessagesData


class LogoutEvent(BaseModel):
    type: Literal["logout"]
    data: LogoutData


class PingEvent(BaseModel):
    type: Literal["ping"]
    data: dict[str, Any] = Field(default_factory=dict)


RealtimeEvent = Annotated[
    Union[JoinEvent, SendMessageEvent, ReadMessagesEvent, LogoutEvent, PingEvent],
    Field(discriminator="type"),
]

_realtime_event_adapter: TypeAdapter[RealtimeEvent] = TypeAdapter(RealtimeEvent)


class InvalidRealtimeEvent(ValueError):
    """Raised when a websocket frame does not describe a known, complete event."""


def parse_realtime_event(raw: Any) -> RealtimeEvent:
    """Validate ``raw`` and return the matching event model."""

    if not isinstance(raw, dict):
        raise InvalidRealtimeEvent("Malformed event")
    try:
        return _realtime_event_adapter.validate_python(raw)
    except ValidationError as exc:
        raise InvalidRealtimeEvent(_describe_errors(raw.get("type"), exc)) from exc


def _describe_errors(event_type: Any, exc: ValidationError) -> str:
    fields = sorted(
        {
            str(error["loc"][-1])
            for error in exc.errors()
            if error.get("loc") and error["loc"][-1] not in ("type", "data")
        }
    )
    if not isinstance(event_type, str) or not fields:
        return "Unknown or malformed event"
    return f"Missing or invalid fields for {event_type}: {', '.join(fields)}"


__all__ = [
    "InvalidRealtimeEvent",
    "JoinEvent",
    "LogoutEvent",
    "PingEvent",
    "ReadMessagesEvent",
    "RealtimeEvent",
    "SendMessageEvent",
    "parse_realtime_event",
]
