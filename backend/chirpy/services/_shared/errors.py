"""
Domain-level exceptions used within the service layer.

These exceptions are **framework-agnostic** and should never import or depend
on Flask or HTTP directly. They serve as stable contracts between the document
store, the domain models, and application services.

The translation to HTTP responses (RFC 7807) is handled by
``chirpy/core/errors.py``.
"""

from __future__ import annotations

from dataclasses import dataclass

# --------------------------------------------------------------------------- #
# Base types
# --------------------------------------------------------------------------- #


class ServiceError(Exception):
    """
    Base class for all service-level errors.

    Notes
    -----
    - These are *not* HTTP errors.
    - The API layer translates them to APIError problems.
    """

    pass


# --------------------------------------------------------------------------- #
# Specific domain-level errors
# --------------------------------------------------------------------------- #


@dataclass(slots=True)
class NotFoundError(ServiceError):
    """
    Raised when an entity is not found in the store.

    :param entity: Entity name (e.g., "Post").
    :type entity: str
    :param key: Identifier or search key.
    :type key: str | int
    """

    entity: str
    key: str | int

    def __str__(self) -> str:  # pragma: no cover
        return f"{self.entity} not found: {self.key}"


@dataclass(slots=True)
class ConflictError(ServiceError):
    """
    Raised when a uniqueness rule is violated.

    :param entity: Entity name (e.g., "Account").
    :type entity: str
    :param detail: Short human-readable explanation.
    :type detail: str
    """

    entity: str
    detail: str

    def __str__(self) -> str:  # pragma: no cover
        return f"Conflict on {self.entity}: {self.detail}"


class AuthorizationError(ServiceError):
    """Raised when the actor is authenticated but may not touch the resource."""


@dataclass(slots=True)
class ValidationFailedError(ServiceError):
    """
    Raised when input passes schema checks but breaks a business rule.

    :param field: Offending field name.
    :param detail: Client-safe explanation.
    """

    field: str
    detail: str

    def __str__(self) -> str:  # pragma: no cover
        return self.detail


class EntropyError(ServiceError):
    """The secure randomness source failed or returned too few bytes."""


# --------------------------------------------------------------------------- #
# Authentication errors
# --------------------------------------------------------------------------- #


class AuthError(ServiceError):
    """Base class for authentication failures (all map to 401)."""


class InvalidCredentialsError(AuthError):
    pass


class InvalidRefreshTokenError(AuthError):
    """Refresh token is unknown, cleared or past its expiry."""


class TokenError(AuthError):
    """Base class for access-token parsing failures."""


class MalformedTokenError(TokenError):
    pass


class InvalidSignatureError(TokenError):
    """Signature mismatch, or the token was signed with an unexpected algorithm."""


class ExpiredTokenError(TokenError):
    pass


class InvalidSubjectError(TokenError):
    """The ``sub`` claim is missing or is not an integer account id."""
