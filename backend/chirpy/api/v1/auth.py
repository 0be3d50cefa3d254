"""Authentication endpoints: login, access-token refresh and revocation."""

from __future__ import annotations

from flask import Blueprint, request

from chirpy.api.deps import bearer_token, empty_response, json_response, timing
from chirpy.core.extensions import build_auth_service
from chirpy.schemas import LoginResponseSchema, LoginSchema, TokenResponseSchema
from chirpy.services.auth import LoginIn

bp = Blueprint("auth", __name__)

login_schema = LoginSchema()
login_response_schema = LoginResponseSchema()
token_schema = TokenResponseSchema()


@bp.post("/login")
@timing
def login():
    """Check credentials and issue an access token plus a refresh token."""

    data = login_schema.load(request.get_json(silent=True) or {})
    result = build_auth_service().login(LoginIn(**data))
    return json_response(login_response_schema.dump(result))


@bp.post("/refresh")
@timing
def refresh():
    """Trade the bearer refresh token for a new access token."""

    token = build_auth_service().refresh(bearer_token())
    return json_response(token_schema.dump({"token": token}))


@bp.post("/revoke")
@timing
def revoke():
    """Clear the bearer refresh token from its account."""

    build_auth_service().revoke(bearer_token())
    return empty_response()
