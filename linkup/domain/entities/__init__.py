"""Domain entities exposed by the application."""

from .comment import Comment
from .friend_request import (
    FRIEND_REQUEST_ACCEPTED,
    FRIEND_REQUEST_PENDING,
    FRIEND_REQUEST_REJECTED,
    FriendRequest,
)
from .message import Message, SentMessage
from .notification import (
    NOTIFICATION_TYPE_COMMENT,
    NOTIFICATION_TYPE_FRIEND_ACCEPTED,
    NOTIFICATION_TYPE_FRIEND_REQUEST,
    NOTIFICATION_TYPE_LIKE,
    NOTIFICATION_TYPE_MESSAGE,
    NOTIFICATION_TYPES,
    Notification,
)
from .post import MEDIA_TYPE_IMAGE, MEDIA_TYPE_VIDEO, Post, PostMedia
from .user import User

__all__ = [
    "Comment",
    "FRIEND_REQUEST_ACCEPTED",
    "FRIEND_REQUEST_PENDING",
    "FRIEND_REQUEST_REJECTED",
    "FriendRequest",
    "MEDIA_TYPE_IMAGE",
    "MEDIA_TYPE_VIDEO",
    "Message",
    "NOTIFICATION_TYPES",
    "NOTIFICATION_TYPE_COMMENT",
    "NOTIFICATION_TYPE_FRIEND_ACCEPTED",
    "NOTIFICATION_TYPE_FRIEND_REQUEST",
    "NOTIFICATION_TYPE_LIKE",
    "NOTIFICATION_TYPE_MESSAGE",
    "Notification",
    "Post",
    "PostMedia",
    "SentMessage",
    "User",
]
