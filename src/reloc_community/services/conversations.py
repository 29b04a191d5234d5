"""Direct messaging: sending, transcripts and per-peer conversation lists."""
from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from reloc_community.core.errors import MissingParameter, require
from reloc_community.db.session import commit_or_raise
from reloc_community.models.message import Message
from reloc_community.models.user import User
from reloc_community.repositories import MessageRepository, PostRepository, UserRepository
from reloc_community.schemas.message import (
    ConversationResponse,
    MessageResponse,
    ParticipantResponse,
)
from reloc_community.services.chat_id import decode_chat_id, encode_chat_id
from reloc_community.services.fanout import EventSink, MessageCreated, publish

logger = logging.getLogger(__name__)


def to_message_response(message: Message) -> MessageResponse:
    """Convert a Message ORM instance to an API schema."""
    return MessageResponse.model_validate(message)


def to_participant(user_id: str, user: User | None) -> ParticipantResponse:
    """Describe the other side of a conversation, falling back to a generic label."""
    if user is None:
        return ParticipantResponse(id=user_id, name=f"User {user_id}")
    return ParticipantResponse(
        id=user_id,
        name=user.label or f"User {user_id}",
        photo_url=user.photo_url or "",
    )


class ConversationService:
    """Message operations for a single request.

    The service owns no state beyond the session it is given. Sending a
    message publishes a ``MessageCreated`` event to ``events`` after the row
    has been committed.
    """

    def __init__(self, session: Session, events: EventSink | None = None) -> None:
        self.session = session
        self.events = events
        self.messages = MessageRepository(session)

    def send_message(
        self,
        sender_id: str | None,
        receiver_id: str | None,
        content: str | None,
        post_id: int | None = None,
        type: str = "text",
    ) -> MessageResponse:
        """Store a message and notify the receiver in the background.

        Raises:
            ValidationError: If sender, receiver or content is missing.
            StoreUnavailable: If the insert cannot be committed.
        """
        require(sender_id=sender_id, receiver_id=receiver_id, content=content)

        message = self.messages.create(
            sender_id=sender_id,
            receiver_id=receiver_id,
            content=content,
            post_id=post_id,
            type=type or "text",
        )
        commit_or_raise(self.session)
        response = to_message_response(message)
        logger.debug("Stored message %s from %s to %s", response.id, sender_id, receiver_id)

        publish(
            self.events,
            MessageCreated(
                message_id=response.id,
                sender_id=response.sender_id,
                receiver_id=response.receiver_id,
                post_id=response.post_id,
            ),
        )
        return response

    def send_message_by_chat_id(
        self,
        chat_id: str,
        content: str | None,
        type: str = "text",
        sender_id: str | None = None,
        receiver_id: str | None = None,
    ) -> MessageResponse:
        """Send a message addressed by chat id.

        The decoded pair only fills in roles the caller did not supply.
        """
        require(chat_id=chat_id, content=content)
        first, second = decode_chat_id(chat_id)
        return self.send_message(
            sender_id or first,
            receiver_id or second,
            content,
            post_id=None,
            type=type,
        )

    def get_messages(
        self,
        uid_a: str | None,
        uid_b: str | None,
        post_id: int | None = None,
    ) -> list[MessageResponse]:
        """Return the chronological transcript between two users."""
        if not uid_a or not uid_b:
            raise MissingParameter("Both user ids are required")
        return [to_message_response(m) for m in self.messages.between(uid_a, uid_b, post_id)]

    def get_messages_by_chat_id(self, chat_id: str) -> list[MessageResponse]:
        """Return the transcript for the two users encoded in ``chat_id``."""
        first, second = decode_chat_id(chat_id)
        return self.get_messages(first, second)

    def list_conversations(self, uid: str | None) -> list[ConversationResponse]:
        """Return one summary per peer ``uid`` has exchanged messages with.

        Each conversation carries its newest message; the list is ordered by
        that message's timestamp, newest first.
        """
        if not uid:
            raise MissingParameter("uid is required")

        latest = self.messages.latest_per_pair(uid)
        if not latest:
            return []

        peers = {self._peer_of(uid, message) for message in latest}
        directory = UserRepository(self.session).get_many(peers)
        previews = self._post_previews(latest)

        conversations = []
        for message in latest:
            peer = self._peer_of(uid, message)
            conversations.append(
                ConversationResponse(
                    id=encode_chat_id(uid, peer),
                    participants=sorted((uid, peer)),
                    other_user=to_participant(peer, directory.get(peer)),
                    last_message=to_message_response(message),
                    updated_at=message.created_at,
                    post_preview=previews.get(message.post_id),
                )
            )
        return conversations

    @staticmethod
    def _peer_of(uid: str, message: Message) -> str:
        return message.receiver_id if message.sender_id == uid else message.sender_id

    def _post_previews(self, messages: list[Message]) -> dict[int, str]:
        post_ids = {m.post_id for m in messages if m.post_id is not None}
        posts = PostRepository(self.session).get_many(post_ids)
        return {post_id: post.content for post_id, post in posts.items()}
