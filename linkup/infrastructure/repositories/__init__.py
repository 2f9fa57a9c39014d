"""Repository implementations for infrastructure layer."""

from .comment_repository import CommentRepository
from .friend_request_repository import FriendRequestRepository
from .like_repository import DuplicateLikeError, LikeRepository
from .message_repository import MessageRepository
from .notification_repository import NotificationRepository
from .post_repository import PostRepository
from .user_repository import UserRepository

__all__ = [
    "CommentRepository",
    "DuplicateLikeError",
    "FriendRequestRepository",
    "LikeRepository",
    "MessageRepository",
    "NotificationRepository",
    "PostRepository",
    "UserRepository",
]
