# tests/v1/test_posts.py
"""Tests for post, like and save endpoints."""

from fastapi import status

from reloc_community.services.fanout import PostCreated


def test_create_post(client, make_user, sink) -> None:
    make_user("a", "Author", photo_url="https://cdn.example/a.png")

    response = client.post(
        "/api/v1/posts/",
        json={"uid": "a", "content": "Looking for a flatmate in Berlin", "type": "housing"},
    )

    assert response.status_code == status.HTTP_201_CREATED
    data = response.json()
    assert data["user_id"] == "a"
    assert data["likes"] == 0
    assert sink.events == [PostCreated(post_id=data["id"], author_id="a")]


def test_create_media_only_post(client) -> None:
    response = client.post(
        "/api/v1/posts/",
        json={"uid": "a", "type": "photo", "media_url": "https://cdn.example/p.jpg"},
    )

    assert response.status_code == status.HTTP_201_CREATED
    assert response.json()["content"] == ""


def test_create_post_validation(client, sink) -> None:
    no_author = client.post("/api/v1/posts/", json={"content": "hi", "type": "general"})
    no_body = client.post("/api/v1/posts/", json={"uid": "a", "type": "general"})
    no_type = client.post("/api/v1/posts/", json={"uid": "a", "content": "hi"})

    assert no_author.status_code == status.HTTP_400_BAD_REQUEST
    assert no_body.json()["detail"] == "Content or media is required"
    assert no_type.json()["detail"] == "Post type is required"
    assert sink.events == []


def test_list_posts_newest_first_with_author(client, make_user, make_post) -> None:
    make_user("a", "Author", photo_url="https://cdn.example/a.png")
    older = make_post("a", "older")
    newer = make_post("ghost", "newer", type="housing")

    response = client.get("/api/v1/posts/")

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert [p["id"] for p in data] == [newer.id, older.id]
    assert data[0]["author"] == "Anonymous"
    assert data[1]["author"] == "Author"
    assert data[1]["author_photo"] == "https://cdn.example/a.png"

    filtered = client.get("/api/v1/posts/", params={"type": "housing"})
    assert [p["id"] for p in filtered.json()] == [newer.id]


def test_toggle_like(client, make_post) -> None:
    post = make_post("a")

    liked = client.post(f"/api/v1/posts/{post.id}/like", json={"userId": "b"})
    other = client.post(f"/api/v1/posts/{post.id}/like", json={"userId": "c"})
    unliked = client.post(f"/api/v1/posts/{post.id}/like", json={"userId": "b"})

    assert liked.json() == {"likes": 1}
    assert other.json() == {"likes": 2}
    assert unliked.json() == {"likes": 1}


def test_like_unknown_post(client) -> None:
    response = client.post("/api/v1/posts/999/like", json={"userId": "b"})

    assert response.status_code == status.HTTP_404_NOT_FOUND


def test_like_requires_user(client, make_post) -> None:
    post = make_post("a")

    response = client.post(f"/api/v1/posts/{post.id}/like", json={})

    assert response.status_code == status.HTTP_400_BAD_REQUEST


def test_save_and_list_saved(client, make_post) -> None:
    post = make_post("a", "keep this")

    saved = client.post(f"/api/v1/posts/{post.id}/save", json={"userId": "b"})
    listed = client.get("/api/v1/posts/saved", params={"user_id": "b"})
    unsaved = client.post(f"/api/v1/posts/{post.id}/save", json={"userId": "b"})
    relisted = client.get("/api/v1/posts/saved", params={"user_id": "b"})

    assert saved.json() == {"saved": True}
    assert [p["id"] for p in listed.json()] == [post.id]
    assert unsaved.json() == {"saved": False}
    assert relisted.json() == []
