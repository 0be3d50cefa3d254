"""Account model and its public projection."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(slots=True)
class Account:
    """
    Authentication identity as persisted in the document store.

    Fields
    ------
    id : int
        Store-assigned, 1-based, dense and immutable.
    email : str
        Login email. Compared case-sensitively, exactly as stored.
    password_hash : str
        Opaque hash produced by the configured password hasher.
    refresh_token : str
        Live refresh token, or ``""`` when none is issued.
    refresh_token_expires_at : datetime | None
        Absolute (UTC) expiry of ``refresh_token``; ``None`` when cleared.
    """

    id: int
    email: str
    password_hash: str
    refresh_token: str = ""
    refresh_token_expires_at: datetime | None = None

    def clear_refresh_token(self) -> None:
        """Drop the live refresh token and reset its expiry."""
        self.refresh_token = ""
        self.refresh_token_expires_at = None

    def to_view(self) -> AccountView:
        return AccountView(id=self.id, email=self.email)


@dataclass(frozen=True, slots=True)
class AccountView:
    """Public projection of an account (never carries hash or token data)."""

    id: int
    email: str
