"""Use cases for the friend request workflow."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from linkup.domain.entities import (
    FRIEND_REQUEST_ACCEPTED,
    FRIEND_REQUEST_PENDING,
    FRIEND_REQUEST_REJECTED,
    FriendRequest,
)
from linkup.infrastructure.realtime import RealtimeEventPublisher
from linkup.infrastructure.repositories import FriendRequestRepository, UserRepository

from ..errors import ConflictError, NotFoundError
from ..notifications import notify_friend_accepted, notify_friend_request

RESPONSE_STATUSES = frozenset({FRIEND_REQUEST_ACCEPTED, FRIEND_REQUEST_REJECTED})


def send_friend_request(
    session: Session,
    publisher: RealtimeEventPublisher,
    *,
    sender_id: int,
    receiver_id: int,
) -> FriendRequest:
    """Create a pending request and notify the receiver."""

    if sender_id == receiver_id:
        raise ValueError("You cannot send a friend request to yourself")
    if UserRepository(session).get(receiver_id) is None:
        raise NotFoundError("User not found")

    repository = FriendRequestRepository(session)
    if repository.has_pending(sender_id=sender_id, receiver_id=receiver_id):
        raise ConflictError("Friend request already sent")

    request = repository.create(sender_id=sender_id, receiver_id=receiver_id)
    notify_friend_request(
        session, publisher, sender_id=sender_id, receiver_id=receiver_id
    )
    return request


def list_friend_requests(session: Session, user_id: int) -> Sequence[FriendRequest]:
    """Return the requests ``user_id`` sent or received."""

    return FriendRequestRepository(session).list_for_user(user_id)


def respond_to_friend_request(
    session: Session,
    publisher: RealtimeEventPublisher,
    request_id: int,
    *,
    user_id: int,
    status: str,
) -> FriendRequest:
    """Accept or reject a pending request addressed to ``user_id``."""

    if status not in RESPONSE_STATUSES:
        raise ValueError("Invalid status")

    repository = FriendRequestRepository(session)
    request = repository.get(request_id)
    if request is None:
        raise NotFoundError("Friend request not found")
    if request.receiver_id != user_id:
        raise PermissionError("Only the receiver can answer this friend request")
    if request.status != FRIEND_REQUEST_PENDING:
        raise ConflictError(f"Friend request already {request.status}")

    updated = repository.update_status(request_id, status)
    if status == FRIEND_REQUEST_ACCEPTED:
        notify_friend_accepted(
            session,
            publisher,
            sender_id=updated.sender_id,
            receiver_id=updated.receiver_id,
        )
    return updated


def remove_friend(session: Session, *, user_id: int, friend_id: int) -> None:
    FriendRequestRepository(session).delete_friendship(user_id, friend_id)
