"""SQLAlchemy model for the user table."""

from sqlalchemy import JSON, Column, DateTime, Integer, String, Text

from linkup.infrastructure.database import Base
from linkup.utils import now_in_app_naive_datetime


class UserModel(Base):
    """Database representation of a network member."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    first_name = Column(String(50), nullable=False)
    last_name = Column(String(50), nullable=False)
    username = Column(String(50), nullable=False, unique=True, index=True)
    email = Column(String(120), nullable=False, unique=True, index=True)
    password = Column(String(255), nullable=False)
    bio = Column(String(255), nullable=True)
    about_me = Column(Text, nullable=True)
    background_color = Column(String(20), nullable=True)
    links = Column(JSON, nullable=False, default=list)
    theme_song_url = Column(String(500), nullable=True)
    theme_song_title = Column(String(200), nullable=True)
    created_at = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)


__all__ = ["UserModel"]
