"""SQLAlchemy models for posts and their media attachments."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from linkup.infrastructure.database import Base
from linkup.utils import now_in_app_naive_datetime


class PostModel(Base):
    """Database representation of a feed post."""

    __tablename__ = "posts"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    content = Column(Text, nullable=False)
    created_at = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)
    updated_at = Column(DateTime(), nullable=True, onupdate=now_in_app_naive_datetime)

    author = relationship("UserModel", lazy="joined")
    media = relationship(
        "PostMediaModel",
        lazy="selectin",
        cascade="all, delete-orphan",
        order_by="PostMediaModel.id",
    )


class PostMediaModel(Base):
    """URL of a file attached to a post."""

    __tablename__ = "media"

    id = Column(Integer, primary_key=True, index=True)
    post_id = Column(Integer, ForeignKey("posts.id"), nullable=False, index=True)
    url = Column(String(500), nullable=False)
    type = Column(String(10), nullable=False)


__all__ = ["PostMediaModel", "PostModel"]
