"""User schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class UserCreate(BaseModel):
    first_name: str = Field(..., min_length=1, max_length=50)
    last_name: str = Field(..., min_length=1, max_length=50)
    username: str = Field(..., min_length=1, max_length=50)
    email: EmailStr
    password: str = Field(..., min_length=1)


class UserRead(BaseModel):
    id: int
    first_name: str
    last_name: str
    username: str
    email: EmailStr
    bio: str | None = None
    about_me: str | None = None
    background_color: str | None = None
    links: list[str] = Field(default_factory=list)
    theme_song_url: str | None = None
    theme_song_title: str | None = None
    created_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)


class ProfileUpdate(BaseModel):
    """Profile customization; only the provided fields are written."""

    about_me: str | None = None
    background_color: str | None = Field(default=None, max_length=20)
    bio: str | None = Field(default=None, max_length=255)
    links: list[str] | None = None
    theme_song_url: str | None = Field(default=None, max_length=500)
    theme_song_title: str | None = Field(default=None, max_length=200)

    model_config = ConfigDict(extra="forbid")
