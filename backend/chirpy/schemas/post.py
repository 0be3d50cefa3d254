"""Chirp Marshmallow schemas."""

from __future__ import annotations

from marshmallow import Schema, fields


class PostCreateSchema(Schema):
    """Input payload for a new chirp. Length rules live in the service."""

    body = fields.String(required=True)


class PostSchema(Schema):
    """Response payload for a chirp."""

    id = fields.Integer(required=True)
    body = fields.String(required=True)
    author_id = fields.Integer(required=True)
