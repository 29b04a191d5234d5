"""Tests for the notification service."""

from __future__ import annotations

from datetime import timedelta

import pytest

from reloc_community.core.errors import MissingParameter, NotFound, ValidationError
from reloc_community.models import Notification
from reloc_community.services.notifications import NotificationService
from tests.conftest import BASE_TIME


def _notification(db_session, user_id: str, title: str, minutes: int) -> Notification:
    notification = Notification(
        user_id=user_id,
        type="comment",
        title=title,
        message=f"{title} body",
        created_at=BASE_TIME + timedelta(minutes=minutes),
    )
    db_session.add(notification)
    db_session.commit()
    return notification


def test_create_notification(db_session) -> None:
    created = NotificationService(db_session).create_notification(
        "u1", "message", "New message", "Ana sent you a message", sender_id="u2"
    )

    assert created.user_id == "u1"
    assert created.read is False
    assert created.sender_id == "u2"
    assert db_session.get(Notification, created.id) is not None


@pytest.mark.parametrize("missing", ["user_id", "type", "title", "message"])
def test_create_notification_requires_fields(db_session, missing) -> None:
    fields = {"user_id": "u1", "type": "post", "title": "New post", "message": "body"}
    fields[missing] = ""

    with pytest.raises(ValidationError) as exc_info:
        NotificationService(db_session).create_notification(**fields)

    assert missing in str(exc_info.value)


def test_list_notifications_newest_first(db_session) -> None:
    _notification(db_session, "u1", "older", minutes=1)
    _notification(db_session, "u1", "newer", minutes=5)
    _notification(db_session, "u2", "someone else's", minutes=9)

    listed = NotificationService(db_session).list_notifications("u1")

    assert [n.title for n in listed] == ["newer", "older"]


def test_list_notifications_requires_user(db_session) -> None:
    with pytest.raises(MissingParameter):
        NotificationService(db_session).list_notifications(None)


def test_mark_read_is_idempotent(db_session) -> None:
    notification = _notification(db_session, "u1", "hello", minutes=1)
    service = NotificationService(db_session)

    first = service.mark_read(notification.id)
    second = service.mark_read(notification.id)

    assert first.read is True
    assert second.read is True
    db_session.expire_all()
    assert db_session.get(Notification, notification.id).read is True


def test_mark_read_unknown_notification(db_session) -> None:
    with pytest.raises(NotFound):
        NotificationService(db_session).mark_read(9999)


def test_settings_default_to_all_channels(db_session) -> None:
    settings = NotificationService(db_session).get_settings("u1")

    assert settings.model_dump() == {"push": True, "email": True, "sms": True, "user_id": "u1"}


def test_settings_are_stored_and_overwritten(db_session) -> None:
    service = NotificationService(db_session)

    service.update_settings("u1", push=False, email=True, sms=False)
    updated = service.update_settings("u1", push=True, email=False, sms=False)

    assert (updated.push, updated.email, updated.sms) == (True, False, False)
    assert service.get_settings("u1") == updated
