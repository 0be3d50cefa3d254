# chirpy/services/accounts/dto.py
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RegisterIn:
    """
    Input DTO for account creation.

    :param email: Login email, stored and compared exactly as given.
    :type email: str
    :param password: Raw password; hashed before it reaches the store.
    :type password: str
    """

    email: str
    password: str


@dataclass(frozen=True, slots=True)
class UpdateCredentialsIn:
    """Input DTO replacing an account's email and password."""

    email: str
    password: str
