"""Data access helpers for the user directory."""
from __future__ import annotations

from collections.abc import Iterable

from sqlalchemy import select
from sqlalchemy.orm import Session

from reloc_community.models.user import User

__all__ = ["UserRepository"]


class UserRepository:
    """Lookups used to resolve display names and enumerate members."""

    def __init__(self, session: Session) -> None:
        """Initialize the repository with a SQLAlchemy session."""
        self.session = session

    def get_by_id(self, user_id: str) -> User | None:
        """Return a user by identifier."""
        return self.session.get(User, user_id)

    def get_many(self, user_ids: Iterable[str]) -> dict[str, User]:
        """Return the known users among ``user_ids`` keyed by id."""
        ids = set(user_ids)
        if not ids:
            return {}
        rows = self.session.scalars(select(User).where(User.id.in_(ids)))
        return {user.id: user for user in rows}

    def list_all(self) -> list[User]:
        """Return every known user ordered by id."""
        return list(self.session.scalars(select(User).order_by(User.id)))

    def upsert(self, user_id: str, **fields: str | None) -> User:
        """Insert a user or update it, keeping stored values where ``fields`` is None."""
        user = self.get_by_id(user_id)
        if user is None:
            user = User(id=user_id)
            self.session.add(user)
        for key, value in fields.items():
            if value is not None:
                setattr(user, key, value)
        self.session.flush()
        return user
