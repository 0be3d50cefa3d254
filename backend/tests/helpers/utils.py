"""Tiny helpers shared across test modules."""

from __future__ import annotations

from typing import Any

TEST_SECRET = "test-secret-0123456789abcdef0123456789abcdef"


def bearer(token: str) -> dict[str, str]:
    """Authorization header carrying ``token`` with the Bearer scheme."""
    return {"Authorization": f"Bearer {token}"}


def register(client, email: str = "user@example.com", password: str = "secret123") -> Any:
    """POST ``/api/v1/users`` and return the response."""
    return client.post("/api/v1/users", json={"email": email, "password": password})


def login(client, email: str = "user@example.com", password: str = "secret123", **extra) -> Any:
    """POST ``/api/v1/login`` and return the response."""
    payload = {"email": email, "password": password, **extra}
    return client.post("/api/v1/login", json=payload)


def register_and_login(
    client, email: str = "user@example.com", password: str = "secret123"
) -> dict[str, Any]:
    """Create an account, log it in and return the login payload."""
    assert register(client, email, password).status_code == 201
    resp = login(client, email, password)
    assert resp.status_code == 200
    return resp.get_json()
