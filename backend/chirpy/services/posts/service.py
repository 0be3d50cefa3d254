# chirpy/services/posts/service.py
from __future__ import annotations

import logging
from collections.abc import Iterable

from chirpy.models import Post
from chirpy.repositories import DocumentStore
from chirpy.services._shared.base import BaseService
from chirpy.services._shared.errors import NotFoundError, ValidationFailedError
from chirpy.services.posts.dto import CreatePostIn
from chirpy.services.posts.profanity import PROFANE_WORDS, clean_body

log = logging.getLogger(__name__)

MAX_BODY_LENGTH = 140


class PostService(BaseService):
    """Create, read and delete chirps on top of the document store."""

    def __init__(
        self,
        *,
        store: DocumentStore,
        max_length: int = MAX_BODY_LENGTH,
        banned_words: Iterable[str] = PROFANE_WORDS,
    ) -> None:
        super().__init__(store=store)
        self.max_length = max_length
        self.banned_words = frozenset(banned_words)

    def create(self, dto: CreatePostIn) -> Post:
        """
        Validate, clean and store a chirp.

        :raises ValidationFailedError: If the body exceeds ``max_length`` characters.
        """
        if len(dto.body) > self.max_length:
            raise ValidationFailedError("body", "Chirp is too long")
        return self.store.create_post(clean_body(dto.body, self.banned_words), dto.author_id)

    def list_posts(self) -> list[Post]:
        """Return every chirp in ascending id order."""
        return sorted(self.store.list_posts(), key=lambda p: p.id)

    def get(self, post_id: int) -> Post:
        post = self.store.get_post(post_id)
        if post is None:
            raise NotFoundError("Chirp", post_id)
        return post

    def delete(self, *, actor_id: int, post_id: int) -> None:
        """
        Delete a chirp owned by ``actor_id``.

        Later chirps are renumbered by the store, so their ids shift down by one.

        :raises NotFoundError: If the chirp does not exist.
        :raises AuthorizationError: If ``actor_id`` is not the author.
        """
        with self.rw_uow():
            post = self.store.get_post(post_id)
            if post is None:
                raise NotFoundError("Chirp", post_id)
            self.ensure_owner(actor_id, post.author_id, msg="You can only delete your own chirps.")
            self.store.delete_post(post_id)
        log.info("post.deleted", extra={"account_id": actor_id, "entity_id": post_id})
