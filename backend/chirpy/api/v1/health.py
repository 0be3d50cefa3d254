"""Health check endpoint."""

from __future__ import annotations

from flask import Blueprint, current_app

from chirpy.api.deps import json_response, timing
from chirpy.core.extensions import get_store
from chirpy.repositories import StoreError

bp = Blueprint("health", __name__)


@bp.get("/healthz")
@timing
def healthcheck():
    """Return application and document store health information."""

    store_status = "ok"
    try:
        with get_store().transaction(read_only=True):
            pass
    except StoreError:
        current_app.logger.exception("healthcheck.store_error")
        store_status = "fail"
    version = current_app.config.get("APP_VERSION", "dev")
    status = 200 if store_status == "ok" else 503
    payload = {
        "status": "ok" if status == 200 else "degraded",
        "store": store_status,
        "version": version,
    }
    return json_response(payload, status=status)
