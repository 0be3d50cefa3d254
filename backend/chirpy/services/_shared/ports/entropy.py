from __future__ import annotations

import secrets
from typing import Protocol


class EntropySource(Protocol):
    """
    Port for cryptographically secure randomness.

    Implementations raise :class:`OSError` (or ``NotImplementedError``) when
    the underlying source is unavailable; the service layer reports that as
    :class:`~chirpy.services._shared.errors.EntropyError`.
    """

    def fill(self, size: int) -> bytes: ...


class SystemEntropySource(EntropySource):
    """Operating-system CSPRNG via :mod:`secrets`."""

    def fill(self, size: int) -> bytes:
        return secrets.token_bytes(size)


class FixedEntropySource(EntropySource):
    """Deterministic source used in unit tests; repeats ``seed`` to ``size``."""

    def __init__(self, seed: bytes = b"\x01") -> None:
        if not seed:
            raise ValueError("seed must not be empty")
        self._seed = seed
        self.calls = 0

    def fill(self, size: int) -> bytes:
        self.calls += 1
        repeated = self._seed * (size // len(self._seed) + 1)
        return repeated[:size]
