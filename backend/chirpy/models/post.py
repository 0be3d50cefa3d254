"""Post (chirp) model."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class Post:
    """
    A short text message owned by an account.

    Fields
    ------
    id : int
        Store-assigned, 1-based and contiguous. Renumbered when a post with a
        lower id is deleted.
    body : str
        Message text (already length-checked and cleaned by the service layer).
    author_id : int
        Id of the :class:`~chirpy.models.account.Account` that wrote the post.
    """

    id: int
    body: str
    author_id: int
