"""
Errors raised by the document store.

They describe *why* the backing file could not be used, so the API layer can
tell an unavailable disk (retryable, 503) apart from a damaged document (500).
"""

from __future__ import annotations

from pathlib import Path


class StoreError(Exception):
    """Base class for every document-store failure."""

    def __init__(self, message: str, *, path: Path | str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.path = str(path) if path is not None else None


class StoreIOError(StoreError):
    """The backing file cannot be created, read or written."""


class CorruptionError(StoreError):
    """The backing file is non-empty but is not a valid document."""


class AccountNotStoredError(StoreError):
    """A full-account replacement targeted an id that does not exist."""

    def __init__(self, account_id: int) -> None:
        super().__init__(f"Account {account_id} is not stored.")
        self.account_id = account_id
