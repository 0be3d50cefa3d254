# chirpy/infra/security/werkzeug_password_hasher.py
from __future__ import annotations

from dataclasses import dataclass

from werkzeug.security import check_password_hash, generate_password_hash

from chirpy.services._shared.ports import PasswordHasher


@dataclass(slots=True)
class WerkzeugPasswordHasher(PasswordHasher):
    """
    Password hashing adapter over :mod:`werkzeug.security`.

    :param method: Werkzeug method string, e.g. ``"scrypt"`` (default) or
        ``"pbkdf2:sha256:1000"`` for fast test runs.
    """

    method: str = "scrypt"

    def hash(self, plaintext: str) -> str:
        if not isinstance(plaintext, str) or not plaintext:
            raise ValueError("Password must be a non-empty string.")
        return generate_password_hash(plaintext, method=self.method)

    def verify(self, password_hash: str, plaintext: str) -> bool:
        if not password_hash:
            return False
        return check_password_hash(password_hash, plaintext)
