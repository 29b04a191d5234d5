# tests/v1/test_comments.py
"""Tests for comment endpoints."""

from fastapi import status
from sqlalchemy import select

from reloc_community.models import Comment
from reloc_community.services.fanout import CommentCreated


def test_add_comment(client, make_post, sink) -> None:
    post = make_post("a")

    response = client.post(
        f"/api/v1/posts/{post.id}/comments",
        json={"user_id": "b", "content": "Welcome to the city!"},
    )

    assert response.status_code == status.HTTP_201_CREATED
    data = response.json()
    assert data["post_id"] == post.id
    assert data["parent_id"] is None
    assert data["replies"] == []
    assert sink.events == [CommentCreated(comment_id=data["id"], post_id=post.id, commenter_id="b")]


def test_add_comment_to_unknown_post(client, sink) -> None:
    response = client.post("/api/v1/posts/404/comments", json={"user_id": "b", "content": "hi"})

    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert sink.events == []


def test_add_comment_requires_content(client, make_post) -> None:
    post = make_post("a")

    response = client.post(f"/api/v1/posts/{post.id}/comments", json={"user_id": "b"})

    assert response.status_code == status.HTTP_400_BAD_REQUEST


def test_reply_must_belong_to_same_post(client, make_post) -> None:
    first = make_post("a", "first")
    second = make_post("a", "second")
    parent = client.post(
        f"/api/v1/posts/{first.id}/comments", json={"user_id": "b", "content": "root"}
    ).json()

    response = client.post(
        f"/api/v1/posts/{second.id}/comments",
        json={"user_id": "c", "content": "reply", "parent_id": parent["id"]},
    )

    assert response.status_code == status.HTTP_400_BAD_REQUEST


def test_comments_are_returned_as_tree(client, make_post) -> None:
    post = make_post("a")
    url = f"/api/v1/posts/{post.id}/comments"
    root = client.post(url, json={"user_id": "b", "content": "root"}).json()
    reply = client.post(url, json={"user_id": "a", "content": "reply", "parent_id": root["id"]}).json()
    client.post(url, json={"user_id": "c", "content": "nested", "parent_id": reply["id"]})
    client.post(url, json={"user_id": "d", "content": "second root"})

    response = client.get(url)

    assert response.status_code == status.HTTP_200_OK
    tree = response.json()
    assert [c["content"] for c in tree] == ["root", "second root"]
    assert tree[0]["replies"][0]["content"] == "reply"
    assert tree[0]["replies"][0]["replies"][0]["content"] == "nested"


def test_delete_comment_removes_replies(client, make_post, db_session) -> None:
    post = make_post("a")
    url = f"/api/v1/posts/{post.id}/comments"
    root = client.post(url, json={"user_id": "b", "content": "root"}).json()
    client.post(url, json={"user_id": "a", "content": "reply", "parent_id": root["id"]})

    response = client.delete(f"/api/v1/posts/comments/{root['id']}")

    assert response.status_code == status.HTTP_204_NO_CONTENT
    assert db_session.scalars(select(Comment)).all() == []
    assert client.delete(f"/api/v1/posts/comments/{root['id']}").status_code == 404
