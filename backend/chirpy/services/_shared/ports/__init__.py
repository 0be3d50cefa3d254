"""
chirpy.services._shared.ports
=============================

Collection of *ports* (hexagonal interfaces) for the collaborators the
authorization layer consumes but does not implement.

Modules
-------
- :mod:`password_hasher`:
    Defines :class:`~.PasswordHasher`, one-way hashing and verification.

- :mod:`entropy`:
    Defines :class:`~.EntropySource` plus the system and fixed sources.

- :mod:`token_signer`:
    Defines :class:`~.TokenSigner`, symmetric sign/verify of access tokens.

Design Notes
------------
Concrete adapters (werkzeug hashing, PyJWT signing) live under
``chirpy.infra``.
"""

from __future__ import annotations

from .entropy import EntropySource, FixedEntropySource, SystemEntropySource
from .password_hasher import PasswordHasher
from .token_signer import TokenSigner

__all__ = [
    "EntropySource",
    "FixedEntropySource",
    "PasswordHasher",
    "SystemEntropySource",
    "TokenSigner",
]
