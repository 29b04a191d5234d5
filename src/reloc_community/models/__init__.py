# src/reloc_community/models/__init__.py
"""SQLAlchemy models for the Reloc community backend."""

from .comment import Comment
from .message import Message
from .notification import Notification, NotificationSettings
from .post import Post, PostLike, SavedPost
from .user import User

__all__ = [
    "Comment",
    "Message",
    "Notification", "NotificationSettings",
    "Post", "PostLike", "SavedPost",
    "User",
]
