"""Factory Boy definitions for the plain dataclass models.

The models are not ORM-backed, so factories only *build* objects; tests put
them on disk through :class:`chirpy.repositories.DocumentStore`.
"""

from __future__ import annotations

import factory
from chirpy.models import Account, PersistedDocument, Post
from werkzeug.security import generate_password_hash

FAST_HASH_METHOD = "pbkdf2:sha256:1000"
DEFAULT_PASSWORD = "Passw0rd!"


class AccountFactory(factory.Factory):
    """Build :class:`chirpy.models.Account` instances with a real hash."""

    class Meta:
        model = Account

    class Params:
        password = DEFAULT_PASSWORD

    id = factory.Sequence(lambda n: n + 1)
    email = factory.Sequence(lambda n: f"user{n}@example.com")
    password_hash = factory.LazyAttribute(
        lambda o: generate_password_hash(o.password, method=FAST_HASH_METHOD)
    )
    refresh_token = ""
    refresh_token_expires_at = None


class PostFactory(factory.Factory):
    """Build :class:`chirpy.models.Post` instances."""

    class Meta:
        model = Post

    id = factory.Sequence(lambda n: n + 1)
    body = factory.Faker("sentence", nb_words=6)
    author_id = 1


def build_document(*, accounts: int = 0, posts: int = 0, author_id: int = 1) -> PersistedDocument:
    """Return a document with ``accounts`` and ``posts`` numbered from 1."""
    doc = PersistedDocument()
    for i in range(1, accounts + 1):
        doc.accounts[i] = AccountFactory.build(id=i, email=f"user{i}@example.com")
    for i in range(1, posts + 1):
        doc.posts[i] = PostFactory.build(id=i, body=f"chirp {i}", author_id=author_id)
    return doc
