"""Chirp endpoints."""

from __future__ import annotations

from flask import Blueprint, g, request

from chirpy.api.deps import empty_response, json_response, require_auth, timing
from chirpy.core.extensions import build_post_service
from chirpy.schemas import PostCreateSchema, PostSchema
from chirpy.services.posts import CreatePostIn

bp = Blueprint("chirps", __name__)

create_schema = PostCreateSchema()
post_schema = PostSchema()
posts_schema = PostSchema(many=True)


@bp.get("")
@timing
def list_chirps():
    """Return every chirp ordered by id."""

    return json_response(posts_schema.dump(build_post_service().list_posts()))


@bp.post("")
@require_auth
@timing
def create_chirp():
    """Publish a chirp authored by the authenticated account."""

    data = create_schema.load(request.get_json(silent=True) or {})
    post = build_post_service().create(CreatePostIn(author_id=g.account_id, body=data["body"]))
    return json_response(post_schema.dump(post), status=201)


@bp.get("/<int:post_id>")
@timing
def get_chirp(post_id: int):
    return json_response(post_schema.dump(build_post_service().get(post_id)))


@bp.delete("/<int:post_id>")
@require_auth
@timing
def delete_chirp(post_id: int):
    """Delete one of the authenticated account's chirps."""

    build_post_service().delete(actor_id=g.account_id, post_id=post_id)
    return empty_response()
