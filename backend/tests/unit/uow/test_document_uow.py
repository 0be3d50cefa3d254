"""
Unit tests for DocumentUnitOfWork (writer, read-only and joined blocks).
"""

from __future__ import annotations

import pytest


class TestDocumentUnitOfWork:
    def test_writer_commits_on_success(self, store):
        """
        GIVEN a writer UoW
        WHEN a post is added inside the context and the block exits cleanly
        THEN the document is written and the post is visible afterwards.
        """
        with store.transaction() as uow:
            uow.document.add_post("hello", 1)

        assert [p.body for p in store.list_posts()] == ["hello"]

    def test_writer_rolls_back_on_exception(self, store, db_path):
        """
        GIVEN a writer UoW
        WHEN an exception is raised inside the context
        THEN the file is left untouched.
        """
        store.create_post("before", 1)
        before = db_path.read_text()

        with pytest.raises(RuntimeError), store.transaction() as uow:
            uow.document.add_post("lost", 1)
            raise RuntimeError("boom")

        assert db_path.read_text() == before

    def test_read_only_never_writes(self, store, db_path):
        with store.transaction(read_only=True) as uow:
            uow.document.add_post("ignored", 1)
        assert db_path.read_text() == ""

    def test_read_only_commit_raises(self, store):
        with store.transaction(read_only=True) as uow, pytest.raises(RuntimeError):
            uow.commit()

    def test_document_outside_block_raises(self, store):
        uow = store.transaction()
        with pytest.raises(RuntimeError):
            _ = uow.document

    def test_nested_calls_join_outer_block(self, store, db_path):
        """
        GIVEN an open writer UoW
        WHEN per-call store operations run inside it
        THEN they share the outer document and nothing hits disk until the
        outer block exits.
        """
        with store.transaction() as outer:
            store.create_post("a", 1)
            store.create_post("b", 1)
            assert len(outer.document.posts) == 2
            assert db_path.read_text() == ""

        assert [p.id for p in store.list_posts()] == [1, 2]

    def test_nested_failure_discards_whole_block(self, store):
        with pytest.raises(ValueError), store.transaction():
            store.create_post("a", 1)
            raise ValueError("abort")

        assert store.list_posts() == []

    def test_writer_inside_read_only_is_rejected(self, store):
        with store.transaction(read_only=True), pytest.raises(RuntimeError):
            store.create_post("nope", 1)

    def test_lock_is_released_after_block(self, store):
        with store.transaction():
            pass
        assert store.lock.acquire(blocking=False)
        store.lock.release()
