"""
Unit tests for the on-disk JSON codec.
"""

from __future__ import annotations

import json
from datetime import UTC, datetime

import pytest
from chirpy.models import PersistedDocument
from chirpy.repositories import CorruptionError
from chirpy.repositories.codec import decode_document, encode_document

from tests.factories import AccountFactory, build_document


class TestDecode:
    def test_empty_text_is_empty_document(self):
        doc = decode_document("")
        assert doc.posts == {}
        assert doc.accounts == {}

    def test_missing_collections_default_to_empty(self):
        doc = decode_document("{}")
        assert doc == PersistedDocument()

    @pytest.mark.parametrize("raw", ["{not json", "   ", "[1, 2]", '"text"'])
    def test_non_document_text_is_corruption(self, raw):
        with pytest.raises(CorruptionError):
            decode_document(raw, source="database.json")

    def test_excessive_nesting_is_corruption(self):
        with pytest.raises(CorruptionError):
            decode_document("[" * 200_000, source="database.json")

    def test_wrong_field_types_are_corruption(self):
        raw = json.dumps({"posts": {"0": {"id": "1", "body": "x", "authorOwnerId": 1}}})
        with pytest.raises(CorruptionError):
            decode_document(raw)

    def test_non_contiguous_ids_are_corruption(self):
        raw = json.dumps(
            {
                "posts": {
                    "0": {"id": 1, "body": "a", "authorOwnerId": 1},
                    "1": {"id": 3, "body": "b", "authorOwnerId": 1},
                }
            }
        )
        with pytest.raises(CorruptionError) as excinfo:
            decode_document(raw, source="db.json")
        assert excinfo.value.path == "db.json"

    def test_records_are_keyed_by_public_id_not_slot(self):
        """Slot keys are ignored in memory; only the record ``id`` matters."""
        raw = json.dumps(
            {
                "posts": {
                    "7": {"id": 2, "body": "second", "authorOwnerId": 1},
                    "3": {"id": 1, "body": "first", "authorOwnerId": 2},
                }
            }
        )
        doc = decode_document(raw)
        assert list(doc.posts) == [1, 2]
        assert doc.posts[1].body == "first"
        assert doc.posts[1].author_id == 2

    def test_unknown_keys_are_ignored(self):
        raw = json.dumps({"posts": {}, "accounts": {}, "extra": 1})
        assert decode_document(raw) == PersistedDocument()

    def test_account_fields_are_read(self):
        raw = json.dumps(
            {
                "accounts": {
                    "0": {
                        "email": "a@example.com",
                        "id": 1,
                        "passwordHash": "hash",
                        "refreshToken": "tok",
                        "tokenExpiresAt": "2030-01-01T00:00:00+00:00",
                    }
                }
            }
        )
        account = decode_document(raw).accounts[1]
        assert account.email == "a@example.com"
        assert account.password_hash == "hash"
        assert account.refresh_token == "tok"
        assert account.refresh_token_expires_at == datetime(2030, 1, 1, tzinfo=UTC)


class TestEncode:
    def test_slot_keys_are_id_minus_one_and_fields_camel_case(self):
        doc = build_document(accounts=1, posts=2)

        payload = json.loads(encode_document(doc))

        assert set(payload) == {"posts", "accounts"}
        assert list(payload["posts"]) == ["0", "1"]
        assert payload["posts"]["1"] == {"id": 2, "body": "chirp 2", "authorOwnerId": 1}
        record = payload["accounts"]["0"]
        assert record["id"] == 1
        assert record["passwordHash"] == doc.accounts[1].password_hash
        assert record["refreshToken"] == ""
        assert record["tokenExpiresAt"] is None

    def test_written_document_reads_back_equal(self):
        doc = build_document(accounts=2, posts=3)
        doc.accounts[2] = AccountFactory.build(
            id=2,
            email="b@example.com",
            refresh_token="ff" * 32,
            refresh_token_expires_at=datetime(2031, 5, 6, 7, 8, 9, tzinfo=UTC),
        )
        assert decode_document(encode_document(doc)) == doc

    def test_non_ascii_text_is_written_verbatim(self):
        doc = PersistedDocument()
        doc.add_post("héllo wörld", author_id=1)
        assert "héllo wörld" in encode_document(doc)
