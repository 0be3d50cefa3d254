from __future__ import annotations

from typing import Any, Protocol


class TokenSigner(Protocol):
    """
    Port for symmetric sign/verify of access tokens.

    ``verify`` MUST raise the token errors from
    :mod:`chirpy.services._shared.errors`:

    - ``InvalidSignatureError`` for a bad signature or unexpected algorithm,
    - ``ExpiredTokenError`` when ``exp`` is in the past,
    - ``MalformedTokenError`` when the token cannot be parsed.
    """

    algorithm: str

    def sign(self, claims: dict[str, Any], secret: str) -> str: ...

    def verify(self, token: str, secret: str) -> dict[str, Any]: ...
