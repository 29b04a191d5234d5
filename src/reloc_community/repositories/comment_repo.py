"""Data access helpers for post comments."""
from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session

from reloc_community.models.comment import Comment

__all__ = ["CommentRepository"]


class CommentRepository:
    """Thin wrapper around database access for comments."""

    def __init__(self, session: Session) -> None:
        """Initialize the repository with a SQLAlchemy session."""
        self.session = session

    def create(
        self,
        *,
        post_id: int,
        user_id: str,
        content: str,
        parent_id: int | None = None,
    ) -> Comment:
        """Insert a comment and flush it to obtain its identifier."""
        comment = Comment(post_id=post_id, user_id=user_id, content=content, parent_id=parent_id)
        self.session.add(comment)
        self.session.flush()
        return comment

    def get_by_id(self, comment_id: int) -> Comment | None:
        """Return a comment by identifier."""
        return self.session.get(Comment, comment_id)

    def list_for_post(self, post_id: int) -> list[Comment]:
        """Return every comment on a post in chronological order."""
        stmt = (
            select(Comment)
            .where(Comment.post_id == post_id)
            .order_by(Comment.created_at.asc(), Comment.id.asc())
        )
        return list(self.session.scalars(stmt))

    def delete(self, comment: Comment) -> None:
        """Remove a comment together with its direct and nested replies."""
        pending = [comment.id]
        doomed: list[Comment] = [comment]
        while pending:
            children = list(
                self.session.scalars(select(Comment).where(Comment.parent_id.in_(pending)))
            )
            doomed.extend(children)
            pending = [child.id for child in children]
        for row in reversed(doomed):
            self.session.delete(row)
        self.session.flush()
