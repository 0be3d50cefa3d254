"""In-memory form of the single persisted aggregate."""

from __future__ import annotations

from dataclasses import dataclass, field

from .account import Account
from .post import Post


@dataclass(slots=True)
class PersistedDocument:
    """
    Every entity the store owns, keyed directly by public id.

    Both mappings are kept in ascending id order. Slot keys only exist in the
    on-disk codec (see :mod:`chirpy.repositories.codec`).
    """

    posts: dict[int, Post] = field(default_factory=dict)
    accounts: dict[int, Account] = field(default_factory=dict)

    def next_post_id(self) -> int:
        return len(self.posts) + 1

    def next_account_id(self) -> int:
        return len(self.accounts) + 1

    def add_post(self, body: str, author_id: int) -> Post:
        post = Post(id=self.next_post_id(), body=body, author_id=author_id)
        self.posts[post.id] = post
        return post

    def add_account(self, email: str, password_hash: str) -> Account:
        account = Account(id=self.next_account_id(), email=email, password_hash=password_hash)
        self.accounts[account.id] = account
        return account

    def remove_post(self, post_id: int) -> bool:
        """
        Remove ``post_id`` and renumber the posts above it.

        Every post whose id is greater than the removed one is shifted down by
        one so ids stay contiguous from 1. Other posts therefore change
        identity after a delete.

        :returns: ``True`` if a post was removed, ``False`` if it was absent.
        """
        if post_id not in self.posts:
            return False
        del self.posts[post_id]
        renumbered: dict[int, Post] = {}
        for post in sorted(self.posts.values(), key=lambda p: p.id):
            if post.id > post_id:
                post.id -= 1
            renumbered[post.id] = post
        self.posts = renumbered
        return True

    def find_account_by_email(self, email: str) -> Account | None:
        for account in self.accounts.values():
            if account.email == email:
                return account
        return None

    def find_account_by_refresh_token(self, token: str) -> Account | None:
        if not token:
            return None
        for account in self.accounts.values():
            if account.refresh_token == token:
                return account
        return None
