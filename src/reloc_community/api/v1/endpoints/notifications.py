# src/reloc_community/api/v1/endpoints/notifications.py
"""Notification endpoints for the Reloc API."""

from __future__ import annotations

from fastapi import APIRouter, Query, status

from reloc_community.schemas.notification import (
    NotificationCreate,
    NotificationResponse,
    NotificationSettingsResponse,
    NotificationSettingsUpdate,
)
from reloc_community.services.notifications import NotificationService

from ..dependencies import SessionDep

router = APIRouter(prefix="/notifications", tags=["notifications"])


@router.post("/", response_model=NotificationResponse, status_code=status.HTTP_201_CREATED)
def add_notification(
    payload: NotificationCreate,
    db: SessionDep,
) -> NotificationResponse:
    """Create a notification for a user."""
    return NotificationService(db).create_notification(
        payload.user_id,
        payload.type,
        payload.title,
        payload.message,
        post_id=payload.post_id,
        comment_id=payload.comment_id,
        sender_id=payload.sender_id,
    )


@router.get("/", response_model=list[NotificationResponse])
def list_notifications(
    db: SessionDep,
    user_id: str | None = Query(None, description="Recipient whose inbox to list"),
) -> list[NotificationResponse]:
    """Return a user's notifications, newest first."""
    return NotificationService(db).list_notifications(user_id)


@router.put("/{notification_id}/read", response_model=NotificationResponse)
def mark_notification_read(notification_id: int, db: SessionDep) -> NotificationResponse:
    """Mark a notification as read."""
    return NotificationService(db).mark_read(notification_id)


@router.get("/settings/{user_id}", response_model=NotificationSettingsResponse)
def get_notification_settings(user_id: str, db: SessionDep) -> NotificationSettingsResponse:
    """Return a user's delivery preferences (all channels on by default)."""
    return NotificationService(db).get_settings(user_id)


@router.put("/settings/{user_id}", response_model=NotificationSettingsResponse)
def update_notification_settings(
    user_id: str,
    payload: NotificationSettingsUpdate,
    db: SessionDep,
) -> NotificationSettingsResponse:
    """Replace a user's delivery preferences."""
    return NotificationService(db).update_settings(
        user_id,
        push=payload.push,
        email=payload.email,
        sms=payload.sms,
    )
