"""Data access helpers for direct messages."""
from __future__ import annotations

from sqlalchemy import and_, case, func, or_, select
from sqlalchemy.orm import Session

from reloc_community.models.message import Message

__all__ = ["MessageRepository"]


class MessageRepository:
    """Append-only store of direct messages.

    The repository never updates or deletes rows; conversations are derived
    from it with read-only queries.
    """

    def __init__(self, session: Session) -> None:
        """Initialize the repository with a SQLAlchemy session."""
        self.session = session

    def create(
        self,
        *,
        sender_id: str,
        receiver_id: str,
        content: str,
        post_id: int | None = None,
        type: str = "text",
    ) -> Message:
        """Insert a new message and flush it so the id and timestamp are assigned."""
        message = Message(
            sender_id=sender_id,
            receiver_id=receiver_id,
            post_id=post_id,
            content=content,
            type=type,
        )
        self.session.add(message)
        self.session.flush()
        return message

    def get_by_id(self, message_id: int) -> Message | None:
        """Return a message by identifier."""
        return self.session.get(Message, message_id)

    def between(self, uid_a: str, uid_b: str, post_id: int | None = None) -> list[Message]:
        """Return the transcript between two users, oldest first."""
        stmt = select(Message).where(
            or_(
                and_(Message.sender_id == uid_a, Message.receiver_id == uid_b),
                and_(Message.sender_id == uid_b, Message.receiver_id == uid_a),
            )
        )
        if post_id is not None:
            stmt = stmt.where(Message.post_id == post_id)
        stmt = stmt.order_by(Message.created_at.asc(), Message.id.asc())
        return list(self.session.scalars(stmt))

    def latest_per_pair(self, uid: str) -> list[Message]:
        """Return the newest message of every conversation ``uid`` takes part in.

        Messages are partitioned by the unordered ``(sender, receiver)`` pair;
        within a partition the row with the greatest ``(created_at, id)`` wins.
        The result is ordered newest first.
        """
        sender_first = Message.sender_id <= Message.receiver_id
        low = case((sender_first, Message.sender_id), else_=Message.receiver_id)
        high = case((sender_first, Message.receiver_id), else_=Message.sender_id)

        rank = (
            func.row_number()
            .over(
                partition_by=(low, high),
                order_by=(Message.created_at.desc(), Message.id.desc()),
            )
            .label("pair_rank")
        )
        ranked = (
            select(Message.id.label("message_id"), rank)
            .where(or_(Message.sender_id == uid, Message.receiver_id == uid))
            .subquery()
        )
        stmt = (
            select(Message)
            .join(ranked, Message.id == ranked.c.message_id)
            .where(ranked.c.pair_rank == 1)
            .order_by(Message.created_at.desc(), Message.id.desc())
        )
        return list(self.session.scalars(stmt))
