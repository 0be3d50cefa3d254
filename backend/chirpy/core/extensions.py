"""Per-app collaborators (document store, adapters) and service builders."""

from __future__ import annotations

from datetime import timedelta

from flask import Flask, current_app

from chirpy.infra.jwt.pyjwt_token_signer import PyJWTTokenSigner
from chirpy.infra.security.werkzeug_password_hasher import WerkzeugPasswordHasher
from chirpy.repositories import DocumentStore
from chirpy.services.accounts import AccountService
from chirpy.services.auth import AuthorizationService, AuthTokenConfig
from chirpy.services.posts import PostService

STORE_KEY = "document_store"
HASHER_KEY = "password_hasher"
SIGNER_KEY = "token_signer"


def init_app(app: Flask) -> None:
    """Open the document store and register the adapters on ``app.extensions``.

    Parameters
    ----------
    app: flask.Flask
        Application whose ``DATABASE_PATH`` is opened. When
        ``RESET_DB_ON_START`` is set the document is truncated first.

    Notes
    -----
    Nothing is stored at module level: every service receives the store of
    the app that handles the request.
    """
    store = DocumentStore.open(app.config["DATABASE_PATH"])
    if app.config.get("RESET_DB_ON_START"):
        store.reset()

    app.extensions[STORE_KEY] = store
    app.extensions[HASHER_KEY] = WerkzeugPasswordHasher(
        method=app.config.get("PASSWORD_HASH_METHOD", "scrypt")
    )
    app.extensions[SIGNER_KEY] = PyJWTTokenSigner()


def get_store(app: Flask | None = None) -> DocumentStore:
    """Return the document store bound to ``app`` (or the current app)."""
    target = app or current_app
    store = target.extensions.get(STORE_KEY)
    if store is None:
        raise RuntimeError("Document store is not initialized. Call init_app() first.")
    return store


def build_auth_service() -> AuthorizationService:
    config = current_app.config
    return AuthorizationService(
        store=get_store(),
        hasher=current_app.extensions[HASHER_KEY],
        signer=current_app.extensions[SIGNER_KEY],
        token_cfg=AuthTokenConfig(
            secret=config["JWT_SECRET"],
            access_max_ttl_seconds=int(config.get("ACCESS_TOKEN_MAX_TTL_SECONDS", 3600)),
            refresh_expires=timedelta(days=int(config.get("REFRESH_TOKEN_TTL_DAYS", 60))),
        ),
    )


def build_account_service() -> AccountService:
    return AccountService(store=get_store(), hasher=current_app.extensions[HASHER_KEY])


def build_post_service() -> PostService:
    config = current_app.config
    banned = [w.strip() for w in str(config.get("PROFANE_WORDS", "")).split(",") if w.strip()]
    return PostService(
        store=get_store(),
        max_length=int(config.get("MAX_CHIRP_LENGTH", 140)),
        banned_words=banned,
    )
