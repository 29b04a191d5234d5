"""Data access helpers for notifications and notification preferences."""
from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session

from reloc_community.models.notification import Notification, NotificationSettings

__all__ = ["NotificationRepository"]


class NotificationRepository:
    """Thin wrapper around database access for notification entities."""

    def __init__(self, session: Session) -> None:
        """Initialize the repository with a SQLAlchemy session."""
        self.session = session

    def create(
        self,
        *,
        user_id: str,
        type: str,
        title: str,
        message: str,
        post_id: int | None = None,
        comment_id: int | None = None,
        sender_id: str | None = None,
    ) -> Notification:
        """Insert a notification and flush it to obtain its identifier."""
        notification = Notification(
            user_id=user_id,
            type=type,
            title=title,
            message=message,
            post_id=post_id,
            comment_id=comment_id,
            sender_id=sender_id,
        )
        self.session.add(notification)
        self.session.flush()
        return notification

    def get_by_id(self, notification_id: int) -> Notification | None:
        """Return a notification by identifier."""
        return self.session.get(Notification, notification_id)

    def list_for_user(self, user_id: str) -> list[Notification]:
        """Return a user's notifications, newest first."""
        stmt = (
            select(Notification)
            .where(Notification.user_id == user_id)
            .order_by(Notification.created_at.desc(), Notification.id.desc())
        )
        return list(self.session.scalars(stmt))

    def mark_read(self, notification_id: int) -> Notification | None:
        """Set ``read`` on a notification; returns None if it does not exist."""
        notification = self.get_by_id(notification_id)
        if notification is None:
            return None
        notification.read = True
        self.session.flush()
        return notification

    def get_settings(self, user_id: str) -> NotificationSettings | None:
        """Return stored delivery preferences for a user, if any."""
        return self.session.get(NotificationSettings, user_id)

    def upsert_settings(
        self, user_id: str, *, push: bool, email: bool, sms: bool
    ) -> NotificationSettings:
        """Insert or overwrite a user's delivery preferences."""
        row = self.get_settings(user_id)
        if row is None:
            row = NotificationSettings(user_id=user_id)
            self.session.add(row)
        row.push = push
        row.email = email
        row.sms = sms
        self.session.flush()
        return row
