"""Tests for chat identifier encoding."""

import pytest

from reloc_community.core.errors import MalformedIdentifier
from reloc_community.services.chat_id import decode_chat_id, encode_chat_id


@pytest.mark.parametrize(
    ("uid_a", "uid_b"),
    [
        ("u1", "u2"),
        ("zed", "alice"),
        ("AbC123", "abc123"),
        ("same", "same"),
    ],
)
def test_encode_is_order_independent(uid_a: str, uid_b: str) -> None:
    assert encode_chat_id(uid_a, uid_b) == encode_chat_id(uid_b, uid_a)


def test_encode_sorts_ids() -> None:
    assert encode_chat_id("u2", "u1") == "u1_u2"


def test_decode_recovers_encoded_pair() -> None:
    decoded = decode_chat_id(encode_chat_id("zed", "alice"))

    assert set(decoded) == {"zed", "alice"}
    assert decoded == ("alice", "zed")


def test_decode_known_identifier() -> None:
    assert decode_chat_id("u1_u2") == ("u1", "u2")


@pytest.mark.parametrize(
    "chat_id",
    ["u1", "u1_u2_u3", "_u2", "u1_", "_", ""],
)
def test_decode_rejects_malformed_identifiers(chat_id: str) -> None:
    with pytest.raises(MalformedIdentifier):
        decode_chat_id(chat_id)


@pytest.mark.parametrize("chat_id", [None, 42, ("u1", "u2")])
def test_decode_rejects_non_strings(chat_id: object) -> None:
    with pytest.raises(MalformedIdentifier):
        decode_chat_id(chat_id)
