# src/reloc_community/api/v1/endpoints/posts.py
"""Post-related endpoints for the Reloc API."""

from __future__ import annotations

from fastapi import APIRouter, Query, status

from reloc_community.schemas.post import PostCreate, PostResponse, PostUserAction
from reloc_community.services import post_service

from ..dependencies import EventSinkDep, SessionDep

router = APIRouter(prefix="/posts", tags=["posts"])


@router.post("/", response_model=PostResponse, status_code=status.HTTP_201_CREATED)
def create_post(
    post_data: PostCreate,
    db: SessionDep,
    events: EventSinkDep,
) -> PostResponse:
    """Publish a post to the community feed."""
    return post_service.create_post(
        db,
        uid=post_data.uid,
        content=post_data.content,
        type=post_data.type,
        media_url=post_data.media_url,
        events=events,
    )


@router.get("/", response_model=list[PostResponse])
def list_posts(
    db: SessionDep,
    limit: int = Query(20, ge=1, le=100, description="Maximum number of posts to return"),
    offset: int = Query(0, ge=0, description="Number of posts to skip"),
    type: str | None = Query(None, description="Filter by post type"),
) -> list[PostResponse]:
    """List posts newest first."""
    return post_service.list_posts(db, limit=limit, offset=offset, type=type)


@router.get("/saved", response_model=list[PostResponse])
def list_saved_posts(
    db: SessionDep,
    user_id: str | None = Query(None, description="User whose saved posts to list"),
) -> list[PostResponse]:
    """Return the posts a user has saved."""
    return post_service.list_saved(db, user_id)


@router.post("/{post_id}/like")
def like_post(post_id: int, action: PostUserAction, db: SessionDep) -> dict[str, int]:
    """Toggle the caller's like on a post."""
    return {"likes": post_service.toggle_like(db, post_id, action.user_id)}


@router.post("/{post_id}/save")
def save_post(post_id: int, action: PostUserAction, db: SessionDep) -> dict[str, bool]:
    """Toggle whether the caller has saved a post."""
    return {"saved": post_service.toggle_save(db, post_id, action.user_id)}
