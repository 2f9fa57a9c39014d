"""Friend request schemas."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict


class FriendRequestCreate(BaseModel):
    receiver_id: int


class FriendRequestUpdate(BaseModel):
    status: Literal["accepted", "rejected"]


class FriendRequestRead(BaseModel):
    id: int
    sender_id: int
    receiver_id: int
    status: str
    created_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)
