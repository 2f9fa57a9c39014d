"""SQLAlchemy model for friend requests."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String

from linkup.infrastructure.database import Base
from linkup.utils import now_in_app_naive_datetime


class FriendRequestModel(Base):
    __tablename__ = "friend_requests"

    id = Column(Integer, primary_key=True, index=True)
    sender_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    receiver_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    status = Column(String(10), nullable=False, default="pending")
    created_at = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)


__all__ = ["FriendRequestModel"]
