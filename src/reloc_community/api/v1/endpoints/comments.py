# src/reloc_community/api/v1/endpoints/comments.py
"""Comment endpoints nested under posts."""

from __future__ import annotations

from fastapi import APIRouter, Response, status

from reloc_community.schemas.comment import CommentCreate, CommentResponse
from reloc_community.services import comment_service

from ..dependencies import EventSinkDep, SessionDep

router = APIRouter(prefix="/posts", tags=["comments"])


@router.post(
    "/{post_id}/comments",
    response_model=CommentResponse,
    status_code=status.HTTP_201_CREATED,
)
def add_comment(
    post_id: int,
    payload: CommentCreate,
    db: SessionDep,
    events: EventSinkDep,
) -> CommentResponse:
    """Comment on a post, or reply to an existing comment."""
    return comment_service.add_comment(
        db,
        post_id=post_id,
        user_id=payload.user_id,
        content=payload.content,
        parent_id=payload.parent_id,
        events=events,
    )


@router.get("/{post_id}/comments", response_model=list[CommentResponse])
def get_comments(post_id: int, db: SessionDep) -> list[CommentResponse]:
    """Return a post's comments as a reply tree."""
    return comment_service.list_comments(db, post_id)


@router.delete("/comments/{comment_id}", status_code=status.HTTP_204_NO_CONTENT)
def remove_comment(comment_id: int, db: SessionDep) -> Response:
    """Delete a comment and its replies."""
    comment_service.delete_comment(db, comment_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
