"""Pydantic models for direct messages."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class MessageRead(BaseModel):
    id: int
    sender_id: int
    receiver_id: int
    content: str
    timestamp: datetime | None = None
    is_read: bool = False

    model_config = ConfigDict(from_attributes=True)


class MarkMessagesReadRequest(BaseModel):
    """Pair whose messages get flagged as read; accepts camelCase keys."""

    sender_id: int = Field(..., alias="senderId", ge=1)
    receiver_id: int = Field(..., alias="receiverId", ge=1)

    model_config = ConfigDict(populate_by_name=True)


class MarkMessagesReadResponse(BaseModel):
    updated: int
