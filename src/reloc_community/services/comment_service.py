"""Service-level helpers for threaded post comments."""
from __future__ import annotations

from sqlalchemy.orm import Session

from reloc_community.core.errors import NotFound, ValidationError, require
from reloc_community.db.session import commit_or_raise
from reloc_community.models.comment import Comment
from reloc_community.repositories import CommentRepository, PostRepository
from reloc_community.schemas.comment import CommentResponse
from reloc_community.services.fanout import CommentCreated, EventSink, publish

__all__ = ["add_comment", "list_comments", "delete_comment", "build_comment_tree"]


def add_comment(
    db: Session,
    *,
    post_id: int,
    user_id: str | None,
    content: str | None,
    parent_id: int | None = None,
    events: EventSink | None = None,
) -> CommentResponse:
    """Add a comment or reply and notify the post author in the background.

    Raises:
        ValidationError: If the commenter or content is missing, or the parent
            comment belongs to another post.
        NotFound: If the post or parent comment does not exist.
    """
    require(user_id=user_id, content=content)
    if PostRepository(db).get_by_id(post_id) is None:
        raise NotFound("Post not found")

    comments = CommentRepository(db)
    if parent_id is not None:
        parent = comments.get_by_id(parent_id)
        if parent is None:
            raise NotFound("Parent comment not found")
        if parent.post_id != post_id:
            raise ValidationError("Parent comment belongs to a different post")

    comment = comments.create(
        post_id=post_id,
        user_id=user_id,
        content=content,
        parent_id=parent_id,
    )
    commit_or_raise(db)
    response = CommentResponse.model_validate(comment)

    publish(
        events,
        CommentCreated(comment_id=response.id, post_id=post_id, commenter_id=response.user_id),
    )
    return response


def list_comments(db: Session, post_id: int) -> list[CommentResponse]:
    """Return a post's comments as a tree of root comments with nested replies."""
    return build_comment_tree(CommentRepository(db).list_for_post(post_id))


def delete_comment(db: Session, comment_id: int) -> None:
    """Delete a comment and its replies."""
    comments = CommentRepository(db)
    comment = comments.get_by_id(comment_id)
    if comment is None:
        raise NotFound("Comment not found")
    comments.delete(comment)
    commit_or_raise(db)


def build_comment_tree(comments: list[Comment]) -> list[CommentResponse]:
    """Nest chronologically ordered comments under their parents.

    Replies whose parent is missing from ``comments`` are dropped.
    """
    nodes = {
        comment.id: CommentResponse(
            id=comment.id,
            post_id=comment.post_id,
            parent_id=comment.parent_id,
            user_id=comment.user_id,
            content=comment.content,
            created_at=comment.created_at,
        )
        for comment in comments
    }
    roots: list[CommentResponse] = []
    for comment in comments:
        node = nodes[comment.id]
        if comment.parent_id is None:
            roots.append(node)
        elif comment.parent_id in nodes:
            nodes[comment.parent_id].replies.append(node)
    return roots
