# chirpy/services/accounts/service.py
from __future__ import annotations

import logging

from chirpy.models import AccountView
from chirpy.repositories import DocumentStore
from chirpy.services._shared.base import BaseService
from chirpy.services._shared.errors import ConflictError, NotFoundError
from chirpy.services._shared.ports import PasswordHasher
from chirpy.services.accounts.dto import RegisterIn, UpdateCredentialsIn

log = logging.getLogger(__name__)


class AccountService(BaseService):
    """
    Account registration and credential changes.

    Email uniqueness is enforced here, not in the store. The check and the
    write share one unit of work so two concurrent registrations with the
    same email cannot both succeed.
    """

    def __init__(self, *, store: DocumentStore, hasher: PasswordHasher) -> None:
        super().__init__(store=store)
        self.hasher = hasher

    def register(self, dto: RegisterIn) -> AccountView:
        """
        Create an account.

        :raises ConflictError: If the email is already used (exact match).
        """
        password_hash = self.hasher.hash(dto.password)
        with self.rw_uow():
            if self.store.get_account_by_email(dto.email) is not None:
                raise ConflictError("Account", "email already used")
            view = self.store.create_account(dto.email, password_hash)
        log.info("account.registered", extra={"account_id": view.id})
        return view

    def update_credentials(self, account_id: int, dto: UpdateCredentialsIn) -> AccountView:
        """
        Replace the email and password of ``account_id``.

        :raises NotFoundError: If the account does not exist.
        :raises ConflictError: If the new email belongs to another account.
        """
        password_hash = self.hasher.hash(dto.password)
        with self.rw_uow():
            account = self.store.get_account(account_id)
            if account is None:
                raise NotFoundError("Account", account_id)
            owner = self.store.get_account_by_email(dto.email)
            if owner is not None and owner.id != account.id:
                raise ConflictError("Account", "email already used")
            account.email = dto.email
            account.password_hash = password_hash
            self.store.update_account(account)
        return account.to_view()

    def get(self, account_id: int) -> AccountView:
        account = self.store.get_account(account_id)
        if account is None:
            raise NotFoundError("Account", account_id)
        return account.to_view()
