"""Cross-origin policy for the Chirpy API."""

from __future__ import annotations

from flask import Flask
from flask_cors import CORS

from chirpy.core.logger import REQUEST_ID_HEADER


def _parse_origins(raw: str) -> list[str]:
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


def init_app(app: Flask) -> None:
    """Allow browser clients to call ``/api/*`` with bearer tokens.

    ``CORS_ORIGINS`` is a comma-separated allow-list. Blank or ``"*"`` means any
    origin and disables credentialed requests.
    """
    origins = _parse_origins(app.config.get("CORS_ORIGINS", ""))
    wildcard = not origins or origins == ["*"]

    CORS(
        app,
        resources={r"/api/*": {"origins": "*" if wildcard else origins}},
        supports_credentials=not wildcard,
        allow_headers=["Authorization", "Content-Type", REQUEST_ID_HEADER],
        expose_headers=[REQUEST_ID_HEADER],
        methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        max_age=app.config.get("CORS_MAX_AGE", 600),
    )
