"""Account and authentication Marshmallow schemas."""

from __future__ import annotations

from marshmallow import Schema, fields, validate


class CredentialsSchema(Schema):
    """Input payload for registration and credential updates."""

    email = fields.String(required=True, validate=validate.Length(min=1, max=254))
    password = fields.String(required=True, validate=validate.Length(min=1, max=128))


class LoginSchema(CredentialsSchema):
    """Input payload for authenticating an account."""

    expires_in_seconds = fields.Integer(load_default=0)


class AccountSchema(Schema):
    """Public account view. Never carries the password hash or tokens."""

    id = fields.Integer(required=True)
    email = fields.String(required=True)


class LoginResponseSchema(AccountSchema):
    """Response payload of a successful login."""

    token = fields.String(required=True)
    refresh_token = fields.String(required=True)


class TokenResponseSchema(Schema):
    """Response payload containing a fresh access token."""

    token = fields.String(required=True)
