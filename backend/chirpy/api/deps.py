"""Shared API helpers for request parsing and cross-cutting concerns."""

from __future__ import annotations

import functools
import time
from collections.abc import Callable
from typing import Any, TypeVar

from flask import Response, current_app, g, jsonify, request

from chirpy.core.errors import Unauthorized
from chirpy.core.extensions import build_auth_service

F = TypeVar("F", bound=Callable[..., Any])

BEARER_PREFIX = "Bearer "


def bearer_token() -> str:
    """
    Return the credential carried in ``Authorization: Bearer <token>``.

    :raises Unauthorized: If the header is missing, uses another scheme or
        carries an empty token.
    """
    header = request.headers.get("Authorization", "")
    if not header.startswith(BEARER_PREFIX):
        raise Unauthorized()
    token = header[len(BEARER_PREFIX) :].strip()
    if not token:
        raise Unauthorized()
    return token


def require_auth(func: F) -> F:
    """Ensure the request carries a valid access token and expose ``g.account_id``."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any):
        g.account_id = build_auth_service().account_id_from_access_token(bearer_token())
        return func(*args, **kwargs)

    return wrapper  # type: ignore[return-value]


def json_response(payload: Any, *, status: int = 200) -> Response:
    """Return a JSON response enforcing a consistent MIME type."""

    response = jsonify(payload)
    response.status_code = status
    return response


def empty_response(status: int = 204) -> Response:
    """Return a body-less response (``204 No Content`` by default)."""

    return Response(status=status)


def timing(func: F) -> F:
    """Decorator capturing handler execution time in milliseconds."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any):
        start = time.perf_counter()
        try:
            return func(*args, **kwargs)
        finally:
            elapsed_ms = (time.perf_counter() - start) * 1000
            request_endpoint = getattr(request, "endpoint", None)
            current_app.logger.debug(
                "request.elapsed",
                extra={"endpoint": request_endpoint, "elapsed_ms": round(elapsed_ms, 2)},
            )

    return wrapper  # type: ignore[return-value]
