# tests/conftest.py
from __future__ import annotations

import contextlib
import os
from collections.abc import Callable, Generator, Iterator
from datetime import datetime, timedelta
from typing import Any

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

os.environ.setdefault("DATABASE_URL", "sqlite://")

from reloc_community.api.v1.dependencies import get_event_sink
from reloc_community.db.session import Base
from reloc_community.db.session import get_db as app_get_session
from reloc_community.main import app as fastapi_app
from reloc_community.models import Message, Post, User
from reloc_community.services.fanout import FanoutEvent, NotificationFanout

TEST_DB_URL = "sqlite://"

# Fixed clock for rows whose ordering a test depends on.
BASE_TIME = datetime(2024, 3, 1, 9, 0, 0)


class RecordingSink:
    """Event sink that keeps published events in memory."""

    def __init__(self) -> None:
        self.events: list[FanoutEvent] = []

    def enqueue(self, event: FanoutEvent) -> bool:
        self.events.append(event)
        return True


class FailingSink:
    """Event sink whose queue is broken."""

    def enqueue(self, event: FanoutEvent) -> bool:
        raise RuntimeError("queue is gone")


@pytest.fixture(scope="session")
def engine() -> Generator[Engine, None, None]:
    engine = create_engine(
        TEST_DB_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture()
def db_session(engine: Engine) -> Iterator[Session]:
    SessionLocal = sessionmaker(
        bind=engine,
        autocommit=False,
        autoflush=False,
        expire_on_commit=False,
    )
    session = SessionLocal()
    try:
        yield session
    finally:
        session.rollback()
        session.close()

        # Services commit, so every test wipes the tables it may have touched.
        with engine.begin() as cleanup_conn:
            for table in reversed(Base.metadata.sorted_tables):
                cleanup_conn.execute(table.delete())


@pytest.fixture()
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture()
def fanout(db_session: Session) -> NotificationFanout:
    """Fan-out writing through the test session."""
    return NotificationFanout(lambda: contextlib.nullcontext(db_session))


@pytest.fixture(scope="session")
def app() -> FastAPI:
    return fastapi_app


@pytest.fixture(autouse=True)
def override_dependencies(app: FastAPI, db_session: Session, sink: RecordingSink) -> Iterator[None]:
    def _get_session_override() -> Generator[Session, None, None]:
        yield db_session

    app.dependency_overrides[app_get_session] = _get_session_override
    app.dependency_overrides[get_event_sink] = lambda: sink
    try:
        yield
    finally:
        app.dependency_overrides.pop(app_get_session, None)
        app.dependency_overrides.pop(get_event_sink, None)


@pytest.fixture()
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app, base_url="http://test") as test_client:
        yield test_client


@pytest.fixture()
def make_user(db_session: Session) -> Callable[..., User]:
    """Return a factory that persists users."""

    def _make(user_id: str, name: str | None = None, **fields: Any) -> User:
        user = User(id=user_id, name=name, **fields)
        db_session.add(user)
        db_session.commit()
        return user

    return _make


@pytest.fixture()
def make_post(db_session: Session) -> Callable[..., Post]:
    """Return a factory that persists posts."""

    def _make(user_id: str, content: str = "Moving to Lisbon next month", **fields: Any) -> Post:
        fields.setdefault("type", "general")
        post = Post(user_id=user_id, content=content, **fields)
        db_session.add(post)
        db_session.commit()
        return post

    return _make


@pytest.fixture()
def make_message(db_session: Session) -> Callable[..., Message]:
    """Return a factory that persists messages at ``BASE_TIME + minutes``."""

    def _make(
        sender_id: str,
        receiver_id: str,
        content: str,
        *,
        minutes: int = 0,
        post_id: int | None = None,
    ) -> Message:
        message = Message(
            sender_id=sender_id,
            receiver_id=receiver_id,
            content=content,
            post_id=post_id,
            created_at=BASE_TIME + timedelta(minutes=minutes),
        )
        db_session.add(message)
        db_session.commit()
        return message

    return _make
