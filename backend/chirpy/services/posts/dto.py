# chirpy/services/posts/dto.py
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CreatePostIn:
    """
    Input DTO for posting a chirp.

    :param author_id: Authenticated account id.
    :type author_id: int
    :param body: Raw text; length-checked and profanity-masked by the service.
    :type body: str
    """

    author_id: int
    body: str
