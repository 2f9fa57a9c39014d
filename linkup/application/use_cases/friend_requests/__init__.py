"""Use cases for friend requests."""

from .manage_requests import (
    RESPONSE_STATUSES,
    list_friend_requests,
    remove_friend,
    respond_to_friend_request,
    send_friend_request,
)

__all__ = [
    "RESPONSE_STATUSES",
    "list_friend_requests",
    "remove_friend",
    "respond_to_friend_request",
    "send_friend_request",
]
