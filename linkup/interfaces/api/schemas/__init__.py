from .auth import Token
from .friend_request import FriendRequestCreate, FriendRequestRead, FriendRequestUpdate
from .message import MarkMessagesReadRequest, MarkMessagesReadResponse, MessageRead
from .notification import NotificationCreate, NotificationRead, StatusMessage
from .post import (
    CommentCreate,
    CommentRead,
    LikeCreate,
    LikeStatusRead,
    PostCreate,
    PostMediaSchema,
    PostRead,
    PostUpdate,
)
from .realtime import (
    InvalidRealtimeEvent,
    JoinEvent,
    LogoutEvent,
    PingEvent,
    ReadMessagesEvent,
    RealtimeEvent,
    SendMessageEvent,
    parse_realtime_event,
)
from .user import ProfileUpdate, UserCreate, UserRead

__all__ = [
    "CommentCreate",
    "CommentRead",
    "FriendRequestCreate",
    "FriendRequestRead",
    "FriendRequestUpdate",
    "InvalidRealtimeEvent",
    "JoinEvent",
    "LikeCreate",
    "LikeStatusRead",
    "LogoutEvent",
    "MarkMessagesReadRequest",
    "MarkMessagesReadResponse",
    "MessageRead",
    "NotificationCreate",
    "NotificationRead",
    "PingEvent",
    "PostCreate",
    "PostMediaSchema",
    "PostRead",
    "PostUpdate",
    "ProfileUpdate",
    "ReadMessagesEvent",
    "RealtimeEvent",
    "SendMessageEvent",
    "StatusMessage",
    "Token",
    "UserCreate",
    "UserRead",
    "parse_realtime_event",
]
