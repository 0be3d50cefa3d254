"""Marshmallow schemas for request validation and response serialization."""

from __future__ import annotations

from .account import (
    AccountSchema,
    CredentialsSchema,
    LoginResponseSchema,
    LoginSchema,
    TokenResponseSchema,
)
from .post import PostCreateSchema, PostSchema

__all__ = [
    "AccountSchema",
    "CredentialsSchema",
    "LoginResponseSchema",
    "LoginSchema",
    "PostCreateSchema",
    "PostSchema",
    "TokenResponseSchema",
]
