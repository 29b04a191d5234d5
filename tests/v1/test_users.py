# tests/v1/test_users.py
"""Tests for user directory endpoints."""

from fastapi import status


def test_sync_creates_user(client) -> None:
    response = client.post(
        "/api/v1/users/sync",
        json={"id": "uid-1", "email": "nora@example.com", "photoURL": "https://cdn.example/n.png"},
    )

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["id"] == "uid-1"
    assert data["name"] == "nora"
    assert data["photo_url"] == "https://cdn.example/n.png"
    assert data["role"] == "user"


def test_sync_keeps_fields_not_sent(client) -> None:
    client.post(
        "/api/v1/users/sync",
        json={"id": "uid-1", "name": "Nora", "company": "Acme", "phone": "+351000"},
    )

    response = client.post("/api/v1/users/sync", json={"id": "uid-1", "displayName": "nora.k"})

    data = response.json()
    assert data["name"] == "nora.k"
    assert data["display_name"] == "nora.k"
    assert data["company"] == "Acme"
    assert data["phone"] == "+351000"


def test_sync_requires_id(client) -> None:
    response = client.post("/api/v1/users/sync", json={"name": "Nobody"})

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["detail"] == "User ID is required"


def test_get_user(client, make_user) -> None:
    make_user("uid-2", "Sam")

    found = client.get("/api/v1/users/uid-2")
    missing = client.get("/api/v1/users/uid-404")

    assert found.status_code == status.HTTP_200_OK
    assert found.json()["name"] == "Sam"
    assert missing.status_code == status.HTTP_404_NOT_FOUND
