# src/reloc_community/models/message.py
"""Models describing direct messages between users."""

from datetime import datetime

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from reloc_community.db.session import Base, utcnow


class Message(Base):
    """Direct message exchanged between two users.

    Rows are append-only: nothing updates a message after it is written. The
    autoincrement id breaks ties between messages sharing a timestamp.
    """

    __tablename__ = "messages"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    sender_id: Mapped[str] = mapped_column(String(128), nullable=False, index=True)
    receiver_id: Mapped[str] = mapped_column(String(128), nullable=False, index=True)
    # Optional post the conversation was started from.
    post_id: Mapped[int | None] = mapped_column(Integer, nullable=True)

    content: Mapped[str] = mapped_column(Text, nullable=False)
    type: Mapped[str] = mapped_column(String(32), nullable=False, default="text")
    is_seen: Mapped[bool] = mapped_column(default=False, nullable=False)
    created_at: Mapped[datetime] = mapped_column(default=utcnow, index=True)
