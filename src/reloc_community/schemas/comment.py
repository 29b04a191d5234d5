# src/reloc_community/schemas/comment.py
"""Comment-related Pydantic schemas."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class CommentCreate(BaseModel):
    """Schema for adding a comment or a reply to a post."""

    user_id: str | None = None
    content: str | None = None
    parent_id: int | None = Field(None, description="Parent comment id for replies")


class CommentResponse(BaseModel):
    """A comment with its nested replies."""

    id: int
    post_id: int
    parent_id: int | None
    user_id: str
    content: str
    created_at: datetime
    replies: list[CommentResponse] = Field(default_factory=list)

    model_config = ConfigDict(from_attributes=True)


CommentResponse.model_rebuild()
