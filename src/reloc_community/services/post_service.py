"""Service-level helpers for posts, likes and saved posts."""
from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from reloc_community.core.errors import MissingParameter, NotFound, ValidationError
from reloc_community.db.session import commit_or_raise
from reloc_community.models.post import Post
from reloc_community.models.user import User
from reloc_community.repositories.post_repo import PostRepository
from reloc_community.schemas.post import PostResponse
from reloc_community.services.fanout import EventSink, PostCreated, publish

logger = logging.getLogger(__name__)

__all__ = [
    "create_post",
    "list_posts",
    "toggle_like",
    "toggle_save",
    "list_saved",
    "to_post_out",
]


def create_post(
    db: Session,
    *,
    uid: str | None,
    content: str | None,
    type: str | None,
    media_url: str | None = None,
    events: EventSink | None = None,
) -> PostResponse:
    """Publish a post and announce it to every other member in the background.

    Raises:
        ValidationError: If the author or type is missing, or the post has
            neither text nor media.
    """
    if not uid:
        raise ValidationError("uid is required")
    if not content and not media_url:
        raise ValidationError("Content or media is required")
    if not type:
        raise ValidationError("Post type is required")

    post = PostRepository(db).create(
        user_id=uid,
        content=content or "",
        type=type,
        media_url=media_url,
    )
    commit_or_raise(db)
    response = to_post_out(post)
    logger.info("Post %s created by %s", response.id, uid)

    publish(events, PostCreated(post_id=response.id, author_id=uid))
    return response


def list_posts(
    db: Session,
    *,
    limit: int = 20,
    offset: int = 0,
    type: str | None = None,
) -> list[PostResponse]:
    """Return the feed, newest first, with author names attached."""
    rows = PostRepository(db).list_recent(limit=limit, offset=offset, type=type)
    return [to_post_out(post, author) for post, author in rows]


def toggle_like(db: Session, post_id: int, user_id: str | None) -> int:
    """Like or unlike a post; returns the new like count."""
    if not user_id:
        raise MissingParameter("user id is required")
    repo = PostRepository(db)
    post = _get_post_or_404(repo, post_id)
    repo.toggle_like(post, user_id)
    commit_or_raise(db)
    return post.likes


def toggle_save(db: Session, post_id: int, user_id: str | None) -> bool:
    """Save or unsave a post; returns True when it ends up saved."""
    if not user_id:
        raise MissingParameter("user id is required")
    repo = PostRepository(db)
    _get_post_or_404(repo, post_id)
    saved = repo.toggle_save(post_id, user_id)
    commit_or_raise(db)
    return saved


def list_saved(db: Session, user_id: str | None) -> list[PostResponse]:
    """Return the posts a user has saved, most recent first."""
    if not user_id:
        raise MissingParameter("user id is required")
    return [to_post_out(post) for post in PostRepository(db).list_saved(user_id)]


def to_post_out(post: Post, author: User | None = None) -> PostResponse:
    """Convert a Post ORM instance to an API schema."""
    return PostResponse.model_construct(
        id=post.id,
        user_id=post.user_id,
        content=post.content,
        type=post.type,
        media_url=post.media_url,
        likes=post.likes or 0,
        created_at=post.created_at,
        author=_author_label(author),
        author_photo=author.photo_url if author else None,
    )


def _author_label(author: User | None) -> str:
    if author is None:
        return "Anonymous"
    return author.label or author.email or "Anonymous"


def _get_post_or_404(repo: PostRepository, post_id: int) -> Post:
    post = repo.get_by_id(post_id)
    if post is None:
        raise NotFound("Post not found")
    return post
