"""SQLAlchemy model for post likes."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, UniqueConstraint

from linkup.infrastructure.database import Base
from linkup.utils import now_in_app_naive_datetime


class LikeModel(Base):
    """A user liking a post, at most once."""

    __tablename__ = "likes"
    __table_args__ = (UniqueConstraint("post_id", "user_id", name="uq_likes_post_user"),)

    id = Column(Integer, primary_key=True, index=True)
    post_id = Column(Integer, ForeignKey("posts.id"), nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    created_at = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)


__all__ = ["LikeModel"]
