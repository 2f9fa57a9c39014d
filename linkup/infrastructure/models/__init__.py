"""ORM models used by the application infrastructure."""

from .comment import CommentModel
from .friend_request import FriendRequestModel
from .like import LikeModel
from .message import MessageModel
from .notification import NotificationModel
from .post import PostMediaModel, PostModel
from .user import UserModel

__all__ = [
    "CommentModel",
    "FriendRequestModel",
    "LikeModel",
    "MessageModel",
    "NotificationModel",
    "PostMediaModel",
    "PostModel",
    "UserModel",
]
