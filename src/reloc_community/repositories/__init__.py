"""Repositories wrapping SQLAlchemy sessions for each aggregate."""

from .comment_repo import CommentRepository
from .message_repo import MessageRepository
from .notification_repo import NotificationRepository
from .post_repo import PostRepository
from .user_repo import UserRepository

__all__ = [
    "CommentRepository",
    "MessageRepository",
    "NotificationRepository",
    "PostRepository",
    "UserRepository",
]
