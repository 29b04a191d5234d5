"""Database session configuration."""

from __future__ import annotations

import logging
from collections.abc import Generator
from datetime import UTC, datetime
from typing import Any

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from reloc_community.core.errors import StoreUnavailable
from reloc_community.core.settings import Settings, settings

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """Declarative base shared by all ORM models."""


def utcnow() -> datetime:
    """Column default for creation and update timestamps.

    Values are timezone-aware UTC. SQLite hands them back naive, so ordering
    and comparisons must not mix stored values with aware ones.
    """
    return datetime.now(UTC)


# Ensure model modules are imported so that metadata is populated when create_all runs.
import reloc_community.models  # noqa: E402,F401


def build_engine(config: Settings) -> Engine:
    """Create an engine for the configured database.

    Pool sizing and timeouts only apply to server databases; SQLite engines
    keep SQLAlchemy's default pool for their URL.
    """
    options: dict[str, Any] = {
        "pool_pre_ping": True,
        "echo": config.sql_debug,
    }
    if not config.uses_sqlite:
        options.update(
            pool_size=config.db_pool_size,
            pool_timeout=config.db_pool_timeout_seconds,
            pool_recycle=config.db_pool_recycle_seconds,
        )
    return create_engine(config.effective_database_url, **options)


engine = build_engine(settings)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db() -> Generator[Session, None, None]:
    """Yield a database session for dependency injection."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def commit_or_raise(db: Session) -> None:
    """Commit the session, translating store failures into ``StoreUnavailable``."""
    try:
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        logger.error("Database commit failed: %s", exc)
        raise StoreUnavailable("The data store rejected the write") from exc


def ping(db: Session) -> bool:
    """Return True when the database answers a trivial query."""
    try:
        db.execute(text("SELECT 1"))
    except SQLAlchemyError as exc:
        logger.warning("Database ping failed: %s", exc)
        return False
    return True


def create_tables() -> None:
    """Create all database tables."""
    Base.metadata.create_all(bind=engine)


def drop_tables() -> None:
    """Drop all database tables."""
    Base.metadata.drop_all(bind=engine)


def dispose_engine() -> None:
    """Release every pooled connection; called on application shutdown."""
    engine.dispose()
