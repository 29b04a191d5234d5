"""Notification inbox operations and delivery preferences."""
from __future__ import annotations

from sqlalchemy.orm import Session

from reloc_community.core.errors import MissingParameter, NotFound, require
from reloc_community.db.session import commit_or_raise
from reloc_community.models.notification import Notification
from reloc_community.repositories import NotificationRepository
from reloc_community.schemas.notification import (
    NotificationResponse,
    NotificationSettingsResponse,
)


def to_notification_response(notification: Notification) -> NotificationResponse:
    """Convert a Notification ORM instance to an API schema."""
    return NotificationResponse.model_validate(notification)


class NotificationService:
    """Create, list and acknowledge notifications for a request."""

    def __init__(self, session: Session) -> None:
        self.session = session
        self.notifications = NotificationRepository(session)

    def create_notification(
        self,
        user_id: str | None,
        type: str | None,
        title: str | None,
        message: str | None,
        post_id: int | None = None,
        comment_id: int | None = None,
        sender_id: str | None = None,
    ) -> NotificationResponse:
        """Store a notification addressed to ``user_id``."""
        require(user_id=user_id, type=type, title=title, message=message)
        notification = self.notifications.create(
            user_id=user_id,
            type=type,
            title=title,
            message=message,
            post_id=post_id,
            comment_id=comment_id,
            sender_id=sender_id,
        )
        commit_or_raise(self.session)
        return to_notification_response(notification)

    def list_notifications(self, user_id: str | None) -> list[NotificationResponse]:
        """Return a user's notifications, newest first."""
        if not user_id:
            raise MissingParameter("user_id is required")
        return [to_notification_response(n) for n in self.notifications.list_for_user(user_id)]

    def mark_read(self, notification_id: int) -> NotificationResponse:
        """Mark a notification as read; repeated calls are harmless.

        Raises:
            NotFound: If no notification has this id.
        """
        notification = self.notifications.mark_read(notification_id)
        if notification is None:
            raise NotFound("Notification not found")
        commit_or_raise(self.session)
        return to_notification_response(notification)

    def get_settings(self, user_id: str) -> NotificationSettingsResponse:
        """Return stored preferences, or the all-enabled defaults."""
        row = self.notifications.get_settings(user_id)
        if row is None:
            return NotificationSettingsResponse(user_id=user_id)
        return NotificationSettingsResponse.model_validate(row)

    def update_settings(
        self, user_id: str, *, push: bool, email: bool, sms: bool
    ) -> NotificationSettingsResponse:
        """Persist a user's delivery preferences."""
        row = self.notifications.upsert_settings(user_id, push=push, email=email, sms=sms)
        commit_or_raise(self.session)
        return NotificationSettingsResponse.model_validate(row)
