"""Pydantic models describing posts, comments and likes."""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class PostMediaSchema(BaseModel):
    url: str = Field(..., min_length=1, max_length=500)
    type: Literal["image", "video"] = "image"

    model_config = ConfigDict(from_attributes=True)


class PostCreate(BaseModel):
    content: str = Field(..., min_length=1)
    media: list[PostMediaSchema] = Field(default_factory=list)


class PostUpdate(BaseModel):
    content: str = Field(..., min_length=1)


class PostRead(BaseModel):
    id: int
    user_id: int
    content: str
    author_name: str | None = None
    like_count: int = 0
    media: list[PostMediaSchema] = Field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)


class CommentCreate(BaseModel):
    post_id: int
    content: str = Field(..., min_length=1)


class CommentRead(BaseModel):
    id: int
    post_id: int
    user_id: int
    content: str
    author_name: str | None = None
    created_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)


class LikeCreate(BaseModel):
    post_id: int


class LikeStatusRead(BaseModel):
    liked: bool
