# chirpy/infra/jwt/pyjwt_token_signer.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, cast

import jwt

from chirpy.services._shared.errors import (
    ExpiredTokenError,
    InvalidSignatureError,
    InvalidSubjectError,
    MalformedTokenError,
)
from chirpy.services._shared.ports import TokenSigner


@dataclass(slots=True)
class PyJWTTokenSigner(TokenSigner):
    """
    HMAC JWT adapter over PyJWT.

    The expected algorithm is pinned: a token whose header announces any
    other ``alg`` (including ``none``) is rejected before its signature is
    even looked at.
    """

    algorithm: str = "HS256"

    def sign(self, claims: dict[str, Any], secret: str) -> str:
        return jwt.encode(claims, secret, algorithm=self.algorithm)

    def verify(self, token: str, secret: str) -> dict[str, Any]:
        try:
            header = jwt.get_unverified_header(token)
        except jwt.InvalidTokenError as exc:
            raise MalformedTokenError("Token cannot be parsed.") from exc

        if header.get("alg") != self.algorithm:
            raise InvalidSignatureError(
                f"Unexpected signing algorithm {header.get('alg')!r}; want {self.algorithm}."
            )

        # Order matters: the specific PyJWT errors subclass InvalidTokenError.
        try:
            claims = jwt.decode(
                token,
                secret,
                algorithms=[self.algorithm],
                options={"require": ["exp", "iat"]},
            )
        except jwt.ExpiredSignatureError as exc:
            raise ExpiredTokenError("Token has expired.") from exc
        except jwt.InvalidSignatureError as exc:
            raise InvalidSignatureError("Token signature is invalid.") from exc
        except jwt.exceptions.InvalidSubjectError as exc:
            raise InvalidSubjectError("Token subject is invalid.") from exc
        except jwt.InvalidTokenError as exc:
            raise MalformedTokenError(f"Token is malformed: {exc}") from exc
        return cast(dict[str, Any], claims)
