"""SQLAlchemy model for post comments."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, Text
from sqlalchemy.orm import relationship

from linkup.infrastructure.database import Base
from linkup.utils import now_in_app_naive_datetime


class CommentModel(Base):
    __tablename__ = "comments"

    id = Column(Integer, primary_key=True, index=True)
    post_id = Column(Integer, ForeignKey("posts.id"), nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    content = Column(Text, nullable=False)
    created_at = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)

    author = relationship("UserModel", lazy="joined")


__all__ = ["CommentModel"]
