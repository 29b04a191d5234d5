"""CRUD-style helpers for the user directory."""
from __future__ import annotations

from sqlalchemy.orm import Session

from reloc_community.core.errors import NotFound, ValidationError
from reloc_community.db.session import commit_or_raise
from reloc_community.models.user import User
from reloc_community.repositories.user_repo import UserRepository
from reloc_community.schemas.user import UserSync

__all__ = ["get_user", "sync_user"]


def get_user(db: Session, user_id: str) -> User:
    """Return a single user by id or raise ``NotFound``."""
    user = UserRepository(db).get_by_id(user_id)
    if user is None:
        raise NotFound("User not found")
    return user


def sync_user(db: Session, payload: UserSync) -> User:
    """Insert or refresh a user from the profile the client signed in with.

    Fields the client leaves empty keep their stored values.
    """
    if not payload.id:
        raise ValidationError("User ID is required")

    photo = payload.photo_url or payload.photo_url_alt
    user = UserRepository(db).upsert(
        payload.id,
        name=payload.name or payload.display_name or _email_handle(payload.email) or "User",
        display_name=payload.display_name or payload.name,
        email=payload.email,
        phone=payload.phone,
        photo_url=photo,
        company=payload.company,
        role=payload.role,
    )
    commit_or_raise(db)
    return user


def _email_handle(email: str | None) -> str | None:
    if not email:
        return None
    return email.split("@", 1)[0] or None
