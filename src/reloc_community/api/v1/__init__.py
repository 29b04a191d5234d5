# src/reloc_community/api/v1/__init__.py
"""Version 1 API endpoints."""

from .endpoints import (
    comments_router,
    messages_router,
    notifications_router,
    posts_router,
    users_router,
)

__all__ = [
    "comments_router",
    "messages_router",
    "notifications_router",
    "posts_router",
    "users_router",
]
