# src/reloc_community/schemas/__init__.py
"""
Pydantic schemas for API request/response models.

These schemas define the structure of API data for serialization and validation.
"""

from .comment import CommentCreate, CommentResponse
from .message import (
    ChatMessageCreate,
    ConversationResponse,
    MessageCreate,
    MessageResponse,
    ParticipantResponse,
)
from .notification import (
    NotificationCreate,
    NotificationResponse,
    NotificationSettingsResponse,
    NotificationSettingsUpdate,
)
from .post import PostCreate, PostResponse, PostUserAction
from .user import UserResponse, UserSync

__all__ = [
    "CommentCreate", "CommentResponse",
    "ChatMessageCreate", "ConversationResponse", "MessageCreate", "MessageResponse",
    "ParticipantResponse",
    "NotificationCreate", "NotificationResponse",
    "NotificationSettingsResponse", "NotificationSettingsUpdate",
    "PostCreate", "PostResponse", "PostUserAction",
    "UserResponse", "UserSync",
]
