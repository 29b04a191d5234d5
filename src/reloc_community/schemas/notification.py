# src/reloc_community/schemas/notification.py
"""Notification-related Pydantic schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class NotificationCreate(BaseModel):
    """Schema for creating a notification directly."""

    user_id: str | None = Field(None, description="Recipient user id")
    type: str | None = Field(None, description="Notification kind, e.g. 'comment'")
    title: str | None = None
    message: str | None = None
    post_id: int | None = None
    comment_id: int | None = None
    sender_id: str | None = None


class NotificationResponse(BaseModel):
    """Schema for notification information returned by the API."""

    id: int
    user_id: str
    type: str
    title: str
    message: str
    post_id: int | None
    comment_id: int | None
    sender_id: str | None
    read: bool
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class NotificationSettingsUpdate(BaseModel):
    """Delivery preferences submitted by a user."""

    push: bool = True
    email: bool = True
    sms: bool = True


class NotificationSettingsResponse(NotificationSettingsUpdate):
    """Delivery preferences for a user, stored or defaulted."""

    user_id: str

    model_config = ConfigDict(from_attributes=True)
