# src/reloc_community/api/v1/endpoints/messages.py
"""Direct message endpoints for the Reloc API."""

from __future__ import annotations

from fastapi import APIRouter, Query, status

from reloc_community.schemas.message import (
    ChatMessageCreate,
    ConversationResponse,
    MessageCreate,
    MessageResponse,
)
from reloc_community.services.conversations import ConversationService

from ..dependencies import EventSinkDep, SessionDep

router = APIRouter(prefix="/messages", tags=["messages"])


@router.post("/", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
def send_message(
    message_data: MessageCreate,
    db: SessionDep,
    events: EventSinkDep,
) -> MessageResponse:
    """Send a direct message to another user."""
    return ConversationService(db, events).send_message(
        message_data.sender_id,
        message_data.receiver_id,
        message_data.content,
        post_id=message_data.post_id,
        type=message_data.type,
    )


@router.get("/", response_model=list[MessageResponse])
def list_messages(
    db: SessionDep,
    user_id: str | None = Query(None, description="One participant"),
    receiver_id: str | None = Query(None, description="The other participant"),
    post_id: int | None = Query(None, description="Restrict to messages about this post"),
) -> list[MessageResponse]:
    """Return the transcript between two users, oldest first."""
    return ConversationService(db).get_messages(user_id, receiver_id, post_id)


@router.get("/conversations", response_model=list[ConversationResponse])
def list_conversations(
    db: SessionDep,
    uid: str | None = Query(None, description="User whose conversations to list"),
) -> list[ConversationResponse]:
    """Return one entry per conversation partner, most recent first."""
    return ConversationService(db).list_conversations(uid)


@router.post(
    "/{chat_id}/send",
    response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
)
def send_message_by_chat_id(
    chat_id: str,
    message_data: ChatMessageCreate,
    db: SessionDep,
    events: EventSinkDep,
) -> MessageResponse:
    """Send a message into the conversation identified by ``chat_id``."""
    return ConversationService(db, events).send_message_by_chat_id(
        chat_id,
        message_data.content,
        type=message_data.type,
        sender_id=message_data.sender_id,
        receiver_id=message_data.receiver_id,
    )


@router.get("/{chat_id}", response_model=list[MessageResponse])
def get_messages_by_chat_id(chat_id: str, db: SessionDep) -> list[MessageResponse]:
    """Return the transcript of the conversation identified by ``chat_id``."""
    return ConversationService(db).get_messages_by_chat_id(chat_id)
