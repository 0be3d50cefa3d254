# tests/unit/services/test_post_service.py
from __future__ import annotations

import pytest
from chirpy.services._shared.errors import (
    AuthorizationError,
    NotFoundError,
    ValidationFailedError,
)
from chirpy.services.posts import CreatePostIn, PostService


def test_create_cleans_profanity(post_service):
    post = post_service.create(CreatePostIn(author_id=1, body="what a Kerfuffle today"))
    assert post.id == 1
    assert post.body == "what a **** today"
    assert post.author_id == 1


def test_create_accepts_exactly_max_length(post_service):
    post = post_service.create(CreatePostIn(author_id=1, body="x" * 140))
    assert len(post.body) == 140


def test_create_rejects_too_long_body(post_service, store):
    with pytest.raises(ValidationFailedError) as excinfo:
        post_service.create(CreatePostIn(author_id=1, body="x" * 141))
    assert excinfo.value.field == "body"
    assert store.list_posts() == []


def test_custom_limits_and_words(store):
    service = PostService(store=store, max_length=10, banned_words=["darn"])
    assert service.create(CreatePostIn(author_id=1, body="darn it")).body == "**** it"
    with pytest.raises(ValidationFailedError):
        service.create(CreatePostIn(author_id=1, body="x" * 11))


def test_list_posts_is_sorted_by_id(post_service):
    for body in ("a", "b", "c"):
        post_service.create(CreatePostIn(author_id=1, body=body))
    assert [p.id for p in post_service.list_posts()] == [1, 2, 3]


def test_get_missing_raises(post_service):
    with pytest.raises(NotFoundError):
        post_service.get(1)


def test_delete_by_author_renumbers(post_service):
    for body in ("a", "b", "c"):
        post_service.create(CreatePostIn(author_id=1, body=body))

    post_service.delete(actor_id=1, post_id=2)

    assert [(p.id, p.body) for p in post_service.list_posts()] == [(1, "a"), (2, "c")]


def test_delete_by_other_account_is_forbidden(post_service):
    post_service.create(CreatePostIn(author_id=1, body="mine"))
    with pytest.raises(AuthorizationError):
        post_service.delete(actor_id=2, post_id=1)
    assert post_service.get(1).body == "mine"


def test_delete_missing_raises(post_service):
    with pytest.raises(NotFoundError):
        post_service.delete(actor_id=1, post_id=3)
