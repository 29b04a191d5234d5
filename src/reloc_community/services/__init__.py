# src/reloc_community/services/__init__.py
"""Business logic services for the Reloc community backend."""

from .conversations import ConversationService
from .fanout import NotificationDispatcher, NotificationFanout
from .notifications import NotificationService

__all__ = [
    "ConversationService",
    "NotificationDispatcher",
    "NotificationFanout",
    "NotificationService",
]
