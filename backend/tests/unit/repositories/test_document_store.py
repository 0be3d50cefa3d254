"""
Unit tests for DocumentStore: file lifecycle, post and account operations,
and serialization of concurrent writers.
"""

from __future__ import annotations

import threading

import pytest
from chirpy.models import AccountView
from chirpy.repositories import (
    AccountNotStoredError,
    CorruptionError,
    DocumentStore,
    StoreIOError,
)


class TestOpen:
    def test_open_creates_missing_file(self, tmp_path):
        path = tmp_path / "database.json"
        DocumentStore.open(path)
        assert path.exists()
        assert path.read_text() == ""

    def test_open_never_truncates_existing_file(self, tmp_path):
        path = tmp_path / "database.json"
        first = DocumentStore.open(path)
        first.create_post("kept", 1)

        reopened = DocumentStore.open(path)

        assert [p.body for p in reopened.list_posts()] == ["kept"]

    def test_open_on_directory_fails(self, tmp_path):
        with pytest.raises(StoreIOError):
            DocumentStore.open(tmp_path)

    def test_open_with_missing_parent_fails(self, tmp_path):
        with pytest.raises(StoreIOError):
            DocumentStore.open(tmp_path / "missing" / "database.json")


class TestPosts:
    def test_create_post_assigns_sequential_ids(self, store):
        a = store.create_post("first", 1)
        b = store.create_post("second", 2)
        assert (a.id, b.id) == (1, 2)
        assert store.get_post(2).author_id == 2

    def test_get_missing_post_returns_none(self, store):
        assert store.get_post(1) is None

    def test_delete_renumbers_and_persists(self, store, db_path):
        for body in ("one", "two", "three"):
            store.create_post(body, 1)

        store.delete_post(1)

        reopened = DocumentStore.open(db_path)
        posts = sorted(reopened.list_posts(), key=lambda p: p.id)
        assert [(p.id, p.body) for p in posts] == [(1, "two"), (2, "three")]

    def test_delete_missing_post_is_noop(self, store, db_path):
        store.create_post("only", 1)
        before = db_path.read_text()

        store.delete_post(5)

        assert db_path.read_text() == before

    def test_no_temporary_file_is_left_behind(self, store, db_path):
        store.create_post("x", 1)
        assert sorted(p.name for p in db_path.parent.iterdir()) == [db_path.name]


class TestAccounts:
    def test_create_account_returns_view_without_hash(self, store):
        view = store.create_account("a@example.com", "hash")
        assert view == AccountView(id=1, email="a@example.com")

    def test_two_accounts_get_ids_one_and_two(self, store):
        first = store.create_account("a@example.com", "h1")
        second = store.create_account("b@example.com", "h2")

        assert (first.id, second.id) == (1, 2)
        assert {a.id for a in store.list_accounts()} == {1, 2}

    def test_store_does_not_enforce_email_uniqueness(self, store):
        store.create_account("a@example.com", "h1")
        store.create_account("a@example.com", "h2")
        assert len(store.list_accounts()) == 2

    def test_get_account_by_email_returns_full_record(self, store):
        store.create_account("a@example.com", "hash")
        account = store.get_account_by_email("a@example.com")
        assert account.password_hash == "hash"
        assert store.get_account_by_email("missing@example.com") is None

    def test_update_account_replaces_whole_record(self, store):
        store.create_account("a@example.com", "hash")
        account = store.get_account(1)
        account.email = "b@example.com"
        account.refresh_token = "tok"

        store.update_account(account)

        stored = store.get_account(1)
        assert stored.email == "b@example.com"
        assert stored.refresh_token == "tok"

    def test_update_unknown_account_fails(self, store):
        account = store.create_account("a@example.com", "hash")
        ghost = store.get_account(account.id)
        ghost.id = 42
        with pytest.raises(AccountNotStoredError):
            store.update_account(ghost)


class TestFailures:
    def test_corrupt_file_raises_on_every_operation(self, store, db_path):
        db_path.write_text("{broken")
        with pytest.raises(CorruptionError):
            store.list_posts()
        with pytest.raises(CorruptionError):
            store.create_post("x", 1)
        assert db_path.read_text() == "{broken"

    def test_invalid_utf8_is_corruption(self, store, db_path):
        raw = b'{"posts": {"0": {"id": 1, "body": "\xff\xfe", "authorOwnerId": 1}}}'
        db_path.write_bytes(raw)
        with pytest.raises(CorruptionError):
            store.list_posts()
        assert db_path.read_bytes() == raw

    def test_failed_replace_removes_temporary_file(self, store, db_path, monkeypatch):
        def _fail(src, dst):
            raise PermissionError("denied")

        monkeypatch.setattr("chirpy.repositories.document_store.os.replace", _fail)

        with pytest.raises(StoreIOError):
            store.create_post("x", 1)

        assert sorted(p.name for p in db_path.parent.iterdir()) == [db_path.name]
        assert db_path.read_text() == ""

    def test_reset_empties_the_document(self, store):
        store.create_post("x", 1)
        store.create_account("a@example.com", "hash")

        store.reset()

        assert store.list_posts() == []
        assert store.list_accounts() == []


class TestConcurrency:
    def test_concurrent_creates_get_unique_contiguous_ids(self, store):
        """
        GIVEN many threads creating posts at once
        WHEN they all finish
        THEN no write is lost and ids are exactly 1..N.
        """
        workers = 16
        barrier = threading.Barrier(workers)
        errors: list[BaseException] = []

        def create(i: int) -> None:
            try:
                barrier.wait()
                store.create_post(f"post {i}", 1)
            except BaseException as exc:  # pragma: no cover
                errors.append(exc)

        threads = [threading.Thread(target=create, args=(i,)) for i in range(workers)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert errors == []
        assert sorted(p.id for p in store.list_posts()) == list(range(1, workers + 1))
