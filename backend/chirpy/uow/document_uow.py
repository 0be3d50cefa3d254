"""
Document-store implementation of UnitOfWork.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from chirpy.models import PersistedDocument
from chirpy.uow.base import UnitOfWork

if TYPE_CHECKING:
    from chirpy.repositories.document_store import DocumentStore


class DocumentUnitOfWork(UnitOfWork):
    """
    Exclusive, whole-document transaction over a :class:`DocumentStore`.

    On enter the store lock is taken and the document is decoded from disk.
    On a clean exit the document is written back (unless read-only); on an
    exception it is discarded and the file is left untouched. The lock is
    released in both cases.

    A unit of work opened while the same thread already holds one *joins* it:
    it shares the outer document and leaves committing to the outer block, so
    per-call store operations can be composed inside a transaction.

    Parameters
    ----------
    store:
        Store whose lock and file are used.
    read_only:
        When ``True`` the document is never written and ``commit()`` raises.
    """

    def __init__(self, store: DocumentStore, *, read_only: bool = False) -> None:
        self.store = store
        self.read_only = read_only
        self._document: PersistedDocument | None = None
        self._outer: DocumentUnitOfWork | None = None

    @property
    def document(self) -> PersistedDocument:
        if self._document is None:
            raise RuntimeError("Unit of work is not active.")
        return self._document

    @property
    def joined(self) -> bool:
        return self._outer is not None

    def __enter__(self) -> DocumentUnitOfWork:
        self.store.lock.acquire()
        try:
            outer = self.store.current_unit_of_work()
            if outer is not None:
                if outer.read_only and not self.read_only:
                    raise RuntimeError("Cannot open a writer inside a read-only unit of work.")
                self._outer = outer
                self._document = outer.document
            else:
                self._document = self.store.read_document()
                self.store.push_unit_of_work(self)
        except BaseException:
            self.store.lock.release()
            raise
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        try:
            if self.joined:
                # the outer block owns commit/rollback
                self._document = None
                return
            try:
                if exc_type is None and not self.read_only:
                    self.commit()
            finally:
                self.store.pop_unit_of_work(self)
                self.rollback()
        finally:
            self.store.lock.release()

    def commit(self) -> None:
        if self.read_only:
            raise RuntimeError("Read-only unit of work cannot commit.")
        self.store.write_document(self.document)

    def rollback(self) -> None:
        self._document = None
