# src/reloc_community/api/v1/endpoints/users.py
"""User directory endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from reloc_community.models import User
from reloc_community.schemas.user import UserResponse, UserSync
from reloc_community.services import user_service

from ..dependencies import SessionDep

router = APIRouter(prefix="/users", tags=["users"])


@router.post("/sync", response_model=UserResponse)
def sync_user(payload: UserSync, db: SessionDep) -> User:
    """Create or refresh the caller's profile after sign-in."""
    return user_service.sync_user(db, payload)


@router.get("/{user_id}", response_model=UserResponse)
def get_user(user_id: str, db: SessionDep) -> User:
    """Return a user's profile."""
    return user_service.get_user(db, user_id)
