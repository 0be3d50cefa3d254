"""Word-level profanity masking for chirp bodies."""

from __future__ import annotations

from collections.abc import Iterable

PROFANE_WORDS: frozenset[str] = frozenset({"kerfuffle", "sharbert", "fornax"})
MASK = "****"


def clean_body(body: str, banned: Iterable[str] = PROFANE_WORDS) -> str:
    """
    Replace banned words with ``****``.

    The body is split on single spaces and each piece is compared
    case-insensitively against ``banned``. Pieces carrying punctuation
    (``"Kerfuffle."``) do not match and are kept as written. Spacing is
    preserved because the pieces are re-joined with single spaces.
    """
    banned_set = {word.lower() for word in banned}
    words = body.split(" ")
    return " ".join(MASK if word.lower() in banned_set else word for word in words)
