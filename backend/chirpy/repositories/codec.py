"""
JSON codec for the persisted document.

On disk every collection is an object keyed by *slot* (``str(id - 1)``) with
camelCase record fields::

    {"posts": {"0": {"id": 1, "body": "...", "authorOwnerId": 1}},
     "accounts": {"0": {"email": "...", "id": 1, "passwordHash": "...",
                        "refreshToken": "", "tokenExpiresAt": null}}}

In memory the slots disappear and records are keyed by their public id.
"""

from __future__ import annotations

import json
from datetime import timezone
from typing import Any

from marshmallow import EXCLUDE, Schema, ValidationError, fields, post_load, validate

from chirpy.models import Account, PersistedDocument, Post
from chirpy.repositories.errors import CorruptionError


class PostRecordSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    id = fields.Integer(required=True, strict=True, validate=validate.Range(min=1))
    body = fields.String(required=True)
    author_id = fields.Integer(required=True, strict=True, data_key="authorOwnerId")

    @post_load
    def make_post(self, data: dict[str, Any], **kwargs: Any) -> Post:
        return Post(**data)


class AccountRecordSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    email = fields.String(required=True)
    id = fields.Integer(required=True, strict=True, validate=validate.Range(min=1))
    password_hash = fields.String(required=True, data_key="passwordHash")
    refresh_token = fields.String(load_default="", data_key="refreshToken")
    refresh_token_expires_at = fields.AwareDateTime(
        allow_none=True,
        load_default=None,
        default_timezone=timezone.utc,
        data_key="tokenExpiresAt",
    )

    @post_load
    def make_account(self, data: dict[str, Any], **kwargs: Any) -> Account:
        return Account(**data)


class DocumentSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    posts = fields.Dict(
        keys=fields.String(), values=fields.Nested(PostRecordSchema), load_default=dict
    )
    accounts = fields.Dict(
        keys=fields.String(), values=fields.Nested(AccountRecordSchema), load_default=dict
    )


_schema = DocumentSchema()


def _index_by_id(records: list[Any], kind: str, source: str | None) -> dict[int, Any]:
    """Key ``records`` by id, requiring ids to be exactly ``1..N``."""
    ordered = sorted(records, key=lambda r: r.id)
    ids = [r.id for r in ordered]
    if ids != list(range(1, len(ids) + 1)):
        raise CorruptionError(f"{kind} ids are not contiguous from 1: {ids}", path=source)
    return {r.id: r for r in ordered}


def decode_document(raw: str, *, source: str | None = None) -> PersistedDocument:
    """
    Parse the file contents into a :class:`PersistedDocument`.

    :param raw: File contents. An empty string yields an empty document.
    :param source: Path used in error messages.
    :raises CorruptionError: When the text is not JSON or does not match the layout.
    """
    if not raw:
        return PersistedDocument()
    try:
        payload = json.loads(raw)
    except (json.JSONDecodeError, RecursionError) as exc:
        raise CorruptionError(f"Document is not valid JSON: {exc}", path=source) from exc
    if not isinstance(payload, dict):
        raise CorruptionError("Document root must be a JSON object.", path=source)
    try:
        data = _schema.load(payload)
    except ValidationError as exc:
        raise CorruptionError(f"Document layout is invalid: {exc.messages}", path=source) from exc

    return PersistedDocument(
        posts=_index_by_id(list(data["posts"].values()), "post", source),
        accounts=_index_by_id(list(data["accounts"].values()), "account", source),
    )


def encode_document(document: PersistedDocument) -> str:
    """Serialize the whole aggregate, re-deriving slot keys from ids."""
    payload = _schema.dump(
        {
            "posts": {str(pid - 1): post for pid, post in sorted(document.posts.items())},
            "accounts": {
                str(aid - 1): account for aid, account in sorted(document.accounts.items())
            },
        }
    )
    return json.dumps(payload, ensure_ascii=False)
