"""Data access helpers for working with posts."""
from __future__ import annotations

from collections.abc import Iterable

from sqlalchemy import delete, func, select
from sqlalchemy.orm import Session

from reloc_community.models.post import Post, PostLike, SavedPost
from reloc_community.models.user import User

__all__ = ["PostRepository"]


class PostRepository:
    """Thin wrapper around database access for post entities."""

    def __init__(self, session: Session) -> None:
        """Initialize the repository with a SQLAlchemy session."""
        self.session = session

    def get_by_id(self, post_id: int) -> Post | None:
        """Return a post by identifier."""
        return self.session.get(Post, post_id)

    def get_many(self, post_ids: Iterable[int]) -> dict[int, Post]:
        """Return the existing posts among ``post_ids`` keyed by id."""
        ids = set(post_ids)
        if not ids:
            return {}
        rows = self.session.scalars(select(Post).where(Post.id.in_(ids)))
        return {post.id: post for post in rows}

    def list_recent(
        self,
        *,
        limit: int = 20,
        offset: int = 0,
        type: str | None = None,
    ) -> list[tuple[Post, User | None]]:
        """Return posts newest first, each paired with its author when known."""
        stmt = select(Post, User).outerjoin(User, User.id == Post.user_id)
        if type:
            stmt = stmt.where(Post.type == type)
        stmt = stmt.order_by(Post.created_at.desc(), Post.id.desc()).limit(limit).offset(offset)
        return [(row[0], row[1]) for row in self.session.execute(stmt)]

    def create(
        self,
        *,
        user_id: str,
        content: str,
        type: str,
        media_url: str | None = None,
    ) -> Post:
        """Insert a new post and return the persisted ORM instance."""
        post = Post(user_id=user_id, content=content, type=type, media_url=media_url)
        self.session.add(post)
        self.session.flush()
        return post

    def toggle_like(self, post: Post, user_id: str) -> Post:
        """Like or unlike a post and refresh its cached like counter."""
        existing = self.session.scalars(
            select(PostLike).where(PostLike.post_id == post.id, PostLike.user_id == user_id)
        ).first()
        if existing is not None:
            self.session.delete(existing)
        else:
            self.session.add(PostLike(post_id=post.id, user_id=user_id))
        self.session.flush()

        post.likes = self.session.scalar(
            select(func.count()).select_from(PostLike).where(PostLike.post_id == post.id)
        ) or 0
        self.session.flush()
        return post

    def toggle_save(self, post_id: int, user_id: str) -> bool:
        """Save or unsave a post; returns True when the post is now saved."""
        existing = self.session.scalars(
            select(SavedPost).where(SavedPost.post_id == post_id, SavedPost.user_id == user_id)
        ).first()
        if existing is not None:
            self.session.execute(
                delete(SavedPost).where(
                    SavedPost.post_id == post_id, SavedPost.user_id == user_id
                )
            )
            self.session.flush()
            return False
        self.session.add(SavedPost(post_id=post_id, user_id=user_id))
        self.session.flush()
        return True

    def list_saved(self, user_id: str) -> list[Post]:
        """Return posts saved by a user, most recently saved first."""
        stmt = (
            select(Post)
            .join(SavedPost, SavedPost.post_id == Post.id)
            .where(SavedPost.user_id == user_id)
            .order_by(SavedPost.created_at.desc(), SavedPost.id.desc())
        )
        return list(self.session.scalars(stmt))
