"""Domain entity representing a friend request between two users."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

FRIEND_REQUEST_PENDING = "pending"
FRIEND_REQUEST_ACCEPTED = "accepted"
FRIEND_REQUEST_REJECTED = "rejected"


@dataclass
class FriendRequest:
    id: int | None
    sender_id: int
    receiver_id: int
    status: str = FRIEND_REQUEST_PENDING
    created_at: datetime | None = None


__all__ = [
    "FRIEND_REQUEST_ACCEPTED",
    "FRIEND_REQUEST_PENDING",
    "FRIEND_REQUEST_REJECTED",
    "FriendRequest",
]
