"""JSON document store: one file, one lock, whole-document read-modify-write."""

from __future__ import annotations

import logging
import os
import threading
from pathlib import Path

from chirpy.models import Account, AccountView, PersistedDocument, Post
from chirpy.repositories.codec import decode_document, encode_document
from chirpy.repositories.errors import AccountNotStoredError, CorruptionError, StoreIOError
from chirpy.uow.document_uow import DocumentUnitOfWork

log = logging.getLogger(__name__)


class DocumentStore:
    """
    Persistence-only store for posts and accounts.

    Every operation decodes the whole file, works on the in-memory
    :class:`~chirpy.models.PersistedDocument` and, for mutations, re-encodes
    the whole aggregate. A single exclusive lock guards each decode/encode.

    Per-call operations hold the lock only for their own load and save. A
    caller that must *check then act* (e.g. email uniqueness then create)
    wraps the sequence in :meth:`transaction`; otherwise concurrent requests
    can interleave between the check and the write (last writer wins).

    This store NEVER validates business rules: it does not check email
    uniqueness, body length or ownership.
    """

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)
        self.lock = threading.RLock()
        self._local = threading.local()

    @classmethod
    def open(cls, path: Path | str) -> DocumentStore:
        """
        Return a store bound to ``path``, creating an empty file if absent.

        An existing file is never truncated.

        :raises StoreIOError: If the path cannot be used (missing parent
            directory, permission denied, path is a directory).
        """
        store = cls(path)
        with store.lock:
            store._ensure_file()
        log.info("store.opened", extra={"path": str(store.path)})
        return store

    # ---------------------------- file access ----------------------------

    def _ensure_file(self) -> None:
        if self.path.is_dir():
            raise StoreIOError(f"Store path is a directory: {self.path}", path=self.path)
        try:
            # append mode creates the file without truncating it
            with self.path.open("a", encoding="utf-8"):
                pass
        except OSError as exc:
            raise StoreIOError(f"Cannot open store file: {exc}", path=self.path) from exc

    def read_document(self) -> PersistedDocument:
        """Decode the file. Callers must hold :attr:`lock`."""
        self._ensure_file()
        try:
            data = self.path.read_bytes()
        except OSError as exc:
            raise StoreIOError(f"Cannot read store file: {exc}", path=self.path) from exc
        try:
            raw = data.decode("utf-8")
        except UnicodeDecodeError as exc:
            log.error("store.corrupt", extra={"path": str(self.path)})
            raise CorruptionError(
                f"Document is not valid UTF-8: {exc}", path=str(self.path)
            ) from exc
        try:
            return decode_document(raw, source=str(self.path))
        except CorruptionError:
            log.error("store.corrupt", extra={"path": str(self.path)})
            raise

    def write_document(self, document: PersistedDocument) -> None:
        """Encode and atomically replace the file. Callers must hold :attr:`lock`."""
        payload = encode_document(document)
        tmp_path = self.path.with_name(f".{self.path.name}.tmp")
        try:
            tmp_path.write_text(payload, encoding="utf-8")
            os.replace(tmp_path, self.path)
        except OSError as exc:
            tmp_path.unlink(missing_ok=True)
            raise StoreIOError(f"Cannot write store file: {exc}", path=self.path) from exc

    def reset(self) -> None:
        """Truncate the file to an empty document."""
        with self.lock:
            try:
                self.path.write_text("", encoding="utf-8")
            except OSError as exc:
                raise StoreIOError(f"Cannot reset store file: {exc}", path=self.path) from exc
        log.warning("store.reset", extra={"path": str(self.path)})

    # ---------------------------- transactions ---------------------------

    def transaction(self, *, read_only: bool = False) -> DocumentUnitOfWork:
        """
        Open a unit of work holding the lock across a whole read-decide-write.

        Usage::

            with store.transaction() as uow:
                if uow.document.find_account_by_email(email) is None:
                    uow.document.add_account(email, password_hash)
        """
        return DocumentUnitOfWork(self, read_only=read_only)

    def current_unit_of_work(self) -> DocumentUnitOfWork | None:
        return getattr(self._local, "current", None)

    def push_unit_of_work(self, uow: DocumentUnitOfWork) -> None:
        self._local.current = uow

    def pop_unit_of_work(self, uow: DocumentUnitOfWork) -> None:
        if getattr(self._local, "current", None) is uow:
            self._local.current = None

    # -------------------------------- posts ------------------------------

    def create_post(self, body: str, author_id: int) -> Post:
        """Append a post with id ``count + 1`` and persist the document."""
        with self.transaction() as uow:
            post = uow.document.add_post(body, author_id)
        log.debug("store.created", extra={"entity": "post", "entity_id": post.id})
        return post

    def delete_post(self, post_id: int) -> None:
        """
        Delete ``post_id`` and renumber every post above it down by one.

        Deleting a missing id is a no-op (no error).
        """
        with self.transaction() as uow:
            removed = uow.document.remove_post(post_id)
            if not removed:
                return
        log.debug("store.deleted", extra={"entity": "post", "entity_id": post_id})

    def get_post(self, post_id: int) -> Post | None:
        with self.transaction(read_only=True) as uow:
            for post in uow.document.posts.values():
                if post.id == post_id:
                    return post
        return None

    def list_posts(self) -> list[Post]:
        """Return every post. Callers must not rely on the order."""
        with self.transaction(read_only=True) as uow:
            return list(uow.document.posts.values())

    # ------------------------------ accounts -----------------------------

    def create_account(self, email: str, password_hash: str) -> AccountView:
        """
        Append an account with the next sequential id.

        Email uniqueness is NOT checked here; callers do it inside a
        :meth:`transaction`.
        """
        with self.transaction() as uow:
            account = uow.document.add_account(email, password_hash)
        log.debug("store.created", extra={"entity": "account", "entity_id": account.id})
        return account.to_view()

    def get_account_by_email(self, email: str) -> Account | None:
        with self.transaction(read_only=True) as uow:
            return uow.document.find_account_by_email(email)

    def get_account(self, account_id: int) -> Account | None:
        with self.transaction(read_only=True) as uow:
            for account in uow.document.accounts.values():
                if account.id == account_id:
                    return account
        return None

    def list_accounts(self) -> list[Account]:
        with self.transaction(read_only=True) as uow:
            return list(uow.document.accounts.values())

    def update_account(self, account: Account) -> None:
        """
        Replace the stored account that has ``account.id``. Last writer wins.

        :raises AccountNotStoredError: If no account has that id.
        """
        with self.transaction() as uow:
            if account.id not in uow.document.accounts:
                raise AccountNotStoredError(account.id)
            uow.document.accounts[account.id] = account
