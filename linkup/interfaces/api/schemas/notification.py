"""Pydantic models describing notification payloads."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class NotificationCreate(BaseModel):
    """Payload used to create a notification for ``user_id``."""

    user_id: int = Field(..., alias="userId", ge=1)
    type: str = Field(..., min_length=1)
    message: str = Field(..., min_length=1)
    from_user_id: int | None = Field(default=None, alias="fromUserId")
    post_id: int | None = Field(default=None, alias="postId")
    comment_id: int | None = Field(default=None, alias="commentId")

    model_config = ConfigDict(populate_by_name=True)


class NotificationRead(BaseModel):
    """Representation of a notification delivered to the client."""

    id: int
    user_id: int
    type: str
    message: str
    from_user_id: int | None = None
    post_id: int | None = None
    comment_id: int | None = None
    is_read: bool = False
    created_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)


class StatusMessage(BaseModel):
    message: str
