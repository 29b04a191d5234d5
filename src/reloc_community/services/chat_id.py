"""Order-independent chat identifiers built from two user ids."""

from __future__ import annotations

from reloc_community.core.errors import MalformedIdentifier

CHAT_ID_SEPARATOR = "_"


def encode_chat_id(uid_a: str, uid_b: str) -> str:
    """Return the chat identifier for a pair of users.

    The two ids are sorted before joining, so ``encode_chat_id(a, b)`` equals
    ``encode_chat_id(b, a)``. Callers must not pass ids containing the
    separator.
    """
    first, second = sorted((uid_a, uid_b))
    return f"{first}{CHAT_ID_SEPARATOR}{second}"


def decode_chat_id(chat_id: object) -> tuple[str, str]:
    """Split a chat identifier back into its two user ids.

    Parts are returned in the order they appear, which for encoded ids is
    sorted order rather than sender/receiver order.

    Raises:
        MalformedIdentifier: If the value is not a string of exactly two
            non-empty parts.
    """
    if not isinstance(chat_id, str):
        raise MalformedIdentifier("Chat id must be a string")
    parts = chat_id.split(CHAT_ID_SEPARATOR)
    if len(parts) != 2 or not all(parts):
        raise MalformedIdentifier(f"Invalid chat id: {chat_id!r}")
    return parts[0], parts[1]
