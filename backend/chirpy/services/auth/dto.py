# chirpy/services/auth/dto.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Any

from chirpy.models import Account

# ---------------------------- Input DTOs ---------------------------------- #


@dataclass(frozen=True, slots=True)
class LoginIn:
    """
    Input DTO for login.

    :param email: Account email, compared exactly as stored.
    :type email: str
    :param password: Raw password (to be verified).
    :type password: str
    :param expires_in_seconds: Requested access-token lifetime; values
        outside ``(0, max)`` fall back to the maximum.
    :type expires_in_seconds: int
    """

    email: str
    password: str
    expires_in_seconds: int = 0


# --------------------------- Output DTOs ---------------------------------- #


@dataclass(frozen=True, slots=True)
class LoginOut:
    """
    Output DTO for a successful login.

    :param id: Account id.
    :param email: Account email.
    :param token: Signed access token.
    :param refresh_token: Opaque refresh token (64 hex chars).
    """

    id: int
    email: str
    token: str
    refresh_token: str


@dataclass(frozen=True, slots=True)
class AccessTokenClaims:
    """Verified claims of an access token."""

    issuer: str | None
    subject: str | None
    issued_at: datetime
    expires_at: datetime
    raw: dict[str, Any]


@dataclass(frozen=True, slots=True)
class RefreshTokenCheck:
    """
    Outcome of a refresh-token lookup.

    :param valid: Token matched an account and has not expired.
    :param account: The owning account when ``valid``; otherwise ``None``.
    :param matched: Token matched an account, even if it has expired.
    """

    valid: bool
    account: Account | None
    matched: bool


# ------------------------ Config DTO -------------------------------------- #


@dataclass(frozen=True, slots=True)
class AuthTokenConfig:
    """
    Token emission configuration.

    :param secret: Shared HMAC secret for access tokens.
    :type secret: str
    :param access_max_ttl_seconds: Cap (and default) for access-token lifetime.
    :type access_max_ttl_seconds: int
    :param refresh_expires: Refresh token lifetime.
    :type refresh_expires: timedelta
    """

    secret: str
    access_max_ttl_seconds: int = 3600
    refresh_expires: timedelta = timedelta(days=60)
