# tests/v1/test_notifications.py
"""Tests for notification endpoints."""

from fastapi import status


def _create(client, user_id: str = "u1", title: str = "New comment") -> dict:
    response = client.post(
        "/api/v1/notifications/",
        json={
            "user_id": user_id,
            "type": "comment",
            "title": title,
            "message": "Ana commented on your post",
            "post_id": 3,
            "sender_id": "u2",
        },
    )
    assert response.status_code == status.HTTP_201_CREATED
    return response.json()


def test_create_and_list_notifications(client) -> None:
    first = _create(client, title="first")
    second = _create(client, title="second")
    _create(client, user_id="u9")

    response = client.get("/api/v1/notifications/", params={"user_id": "u1"})

    assert response.status_code == status.HTTP_200_OK
    ids = [n["id"] for n in response.json()]
    assert sorted(ids) == sorted([first["id"], second["id"]])
    assert all(n["read"] is False for n in response.json())


def test_create_notification_missing_fields(client) -> None:
    response = client.post("/api/v1/notifications/", json={"user_id": "u1", "type": "post"})

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert "title" in response.json()["detail"]


def test_list_notifications_requires_user(client) -> None:
    response = client.get("/api/v1/notifications/")

    assert response.status_code == status.HTTP_400_BAD_REQUEST


def test_mark_read_twice(client) -> None:
    created = _create(client)

    first = client.put(f"/api/v1/notifications/{created['id']}/read")
    second = client.put(f"/api/v1/notifications/{created['id']}/read")

    assert first.status_code == status.HTTP_200_OK
    assert second.status_code == status.HTTP_200_OK
    assert second.json()["read"] is True


def test_mark_read_unknown_notification(client) -> None:
    response = client.put("/api/v1/notifications/424242/read")

    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json()["detail"] == "Notification not found"


def test_notification_settings(client) -> None:
    default = client.get("/api/v1/notifications/settings/u1")
    assert default.status_code == status.HTTP_200_OK
    assert default.json() == {"user_id": "u1", "push": True, "email": True, "sms": True}

    updated = client.put(
        "/api/v1/notifications/settings/u1",
        json={"push": False, "email": True, "sms": False},
    )
    assert updated.status_code == status.HTTP_200_OK

    stored = client.get("/api/v1/notifications/settings/u1")
    assert stored.json() == {"user_id": "u1", "push": False, "email": True, "sms": False}
