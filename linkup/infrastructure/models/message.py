"""SQLAlchemy model for direct messages."""

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Index, Integer, Text
from sqlalchemy.sql import expression

from linkup.infrastructure.database import Base
from linkup.utils import now_in_app_naive_datetime


class MessageModel(Base):
    """Database representation of a message between two users."""

    __tablename__ = "messages"
    __table_args__ = (Index("ix_messages_pair", "sender_id", "receiver_id"),)

    id = Column(Integer, primary_key=True, index=True)
    sender_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    receiver_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    content = Column(Text, nullable=False)
    timestamp = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)
    is_read = Column(
        Boolean,
        nullable=False,
        default=False,
        server_default=expression.false(),
    )


__all__ = ["MessageModel"]
