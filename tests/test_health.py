"""Tests for service-level endpoints."""

from fastapi import status
from sqlalchemy.exc import OperationalError

from reloc_community.core.errors import StoreUnavailable
from reloc_community.services.fanout import NotificationDispatcher


def test_health_reports_connected_database(client) -> None:
    response = client.get("/health")

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"status": "ok", "database": "connected"}


def test_health_reports_unreachable_database(client, db_session, mocker) -> None:
    mocker.patch.object(
        db_session,
        "execute",
        side_effect=OperationalError("SELECT 1", None, Exception("connection refused")),
    )

    response = client.get("/health")

    assert response.status_code == status.HTTP_503_SERVICE_UNAVAILABLE
    assert response.json()["database"] == "disconnected"


def test_root_lists_endpoints(client) -> None:
    response = client.get("/")

    assert response.status_code == status.HTTP_200_OK
    assert response.json()["endpoints"]["messages"] == "/api/v1/messages"


def test_dispatcher_lifecycle_follows_app(app, client) -> None:
    assert isinstance(app.state.notification_dispatcher, NotificationDispatcher)


def test_store_failure_maps_to_503(client, db_session, mocker) -> None:
    mocker.patch.object(
        db_session,
        "commit",
        side_effect=OperationalError("COMMIT", None, Exception("read-only database")),
    )

    response = client.post(
        "/api/v1/messages/",
        json={"senderId": "u1", "receiverId": "u2", "content": "hello"},
    )

    assert response.status_code == status.HTTP_503_SERVICE_UNAVAILABLE
    assert response.json()["detail"] == str(StoreUnavailable("The data store rejected the write"))
