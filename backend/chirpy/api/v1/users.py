"""Account endpoints."""

from __future__ import annotations

from flask import Blueprint, g, request

from chirpy.api.deps import json_response, require_auth, timing
from chirpy.core.extensions import build_account_service
from chirpy.schemas import AccountSchema, CredentialsSchema
from chirpy.services.accounts import RegisterIn, UpdateCredentialsIn

bp = Blueprint("users", __name__)

credentials_schema = CredentialsSchema()
account_schema = AccountSchema()


@bp.post("")
@timing
def register():
    """Create an account and return its public view."""

    data = credentials_schema.load(request.get_json(silent=True) or {})
    view = build_account_service().register(RegisterIn(**data))
    return json_response(account_schema.dump(view), status=201)


@bp.put("")
@require_auth
@timing
def update_credentials():
    """Replace the authenticated account's email and password."""

    data = credentials_schema.load(request.get_json(silent=True) or {})
    view = build_account_service().update_credentials(g.account_id, UpdateCredentialsIn(**data))
    return json_response(account_schema.dump(view))
