# src/reloc_community/models/notification.py
"""Models for user notifications and per-user delivery preferences."""

from datetime import datetime

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from reloc_community.db.session import Base, utcnow

NOTIFICATION_TYPE_MESSAGE = "message"
NOTIFICATION_TYPE_COMMENT = "comment"
NOTIFICATION_TYPE_POST = "post"


class Notification(Base):
    """Notification addressed to a single recipient.

    ``read`` is the only column that changes after insertion.
    """

    __tablename__ = "notifications"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[str] = mapped_column(String(128), nullable=False, index=True)
    type: Mapped[str] = mapped_column(String(32), nullable=False)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    message: Mapped[str] = mapped_column(Text, nullable=False)

    # Correlation fields; all optional.
    post_id: Mapped[int | None] = mapped_column(Integer, nullable=True)
    comment_id: Mapped[int | None] = mapped_column(Integer, nullable=True)
    sender_id: Mapped[str | None] = mapped_column(String(128), nullable=True)

    read: Mapped[bool] = mapped_column(default=False, nullable=False)
    created_at: Mapped[datetime] = mapped_column(default=utcnow)


class NotificationSettings(Base):
    """Delivery channel preferences for a user."""

    __tablename__ = "notification_settings"

    user_id: Mapped[str] = mapped_column(String(128), primary_key=True)
    push: Mapped[bool] = mapped_column(default=True, nullable=False)
    email: Mapped[bool] = mapped_column(default=True, nullable=False)
    sms: Mapped[bool] = mapped_column(default=True, nullable=False)
