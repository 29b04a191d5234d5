# src/reloc_community/schemas/post.py
"""Post-related Pydantic schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class PostCreate(BaseModel):
    """Schema for creating a new post."""

    uid: str | None = Field(None, description="Author user id")
    content: str | None = Field(None, max_length=5000, description="Post text")
    type: str | None = Field(None, description="Post category tag")
    media_url: str | None = Field(None, description="URL of already-uploaded media")


class PostResponse(BaseModel):
    """Schema for post information returned by the API."""

    id: int
    user_id: str
    content: str
    type: str
    media_url: str | None
    likes: int
    created_at: datetime
    author: str | None = None
    author_photo: str | None = None

    model_config = ConfigDict(from_attributes=True)


class PostUserAction(BaseModel):
    """Body for like/save toggles."""

    user_id: str | None = Field(None, alias="userId")

    model_config = ConfigDict(populate_by_name=True)
