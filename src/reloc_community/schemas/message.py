# src/reloc_community/schemas/message.py
"""Direct message and conversation Pydantic schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class MessageCreate(BaseModel):
    """Schema for sending a direct message between two users."""

    sender_id: str | None = Field(None, alias="senderId", description="Sending user id")
    receiver_id: str | None = Field(None, alias="receiverId", description="Receiving user id")
    content: str | None = Field(None, description="Message text")
    post_id: int | None = Field(None, description="Optional related post")
    type: str = Field("text", description="Message kind tag")

    model_config = ConfigDict(populate_by_name=True)


class ChatMessageCreate(BaseModel):
    """Schema for sending a message addressed by chat identifier."""

    content: str | None = Field(None, description="Message text")
    type: str = Field("text", description="Message kind tag")
    sender_id: str | None = Field(None, alias="senderId")
    receiver_id: str | None = Field(None, alias="receiverId")

    model_config = ConfigDict(populate_by_name=True)


class MessageResponse(BaseModel):
    """Schema for a stored direct message."""

    id: int
    sender_id: str
    receiver_id: str
    post_id: int | None
    content: str
    type: str
    is_seen: bool
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class ParticipantResponse(BaseModel):
    """The other party of a conversation as shown in a conversation list."""

    id: str
    name: str
    photo_url: str = ""


class ConversationResponse(BaseModel):
    """Most-recent-message summary of a two-party conversation."""

    id: str
    participants: list[str]
    other_user: ParticipantResponse
    last_message: MessageResponse
    updated_at: datetime
    post_preview: str | None = None
