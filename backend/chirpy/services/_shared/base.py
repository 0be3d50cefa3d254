# chirpy/services/_shared/base.py
from __future__ import annotations

from datetime import UTC, datetime

from chirpy.repositories import DocumentStore
from chirpy.uow import DocumentUnitOfWork


class BaseService:
    """
    Base class for application services.

    Responsibilities
    ----------------
    * Hold the injected :class:`DocumentStore` (never a module-level handle).
    * Provide helpers to open read-only and read-write units of work.
    * Offer the shared ownership policy.

    Notes
    -----
    - Compound check-then-act sequences must run inside ``rw_uow()`` so the
      store lock spans the whole sequence.
    """

    def __init__(self, *, store: DocumentStore) -> None:
        """
        Initialize the base service.

        :param store: Document store shared by the application.
        :type store: DocumentStore
        """
        self.store = store

    # -------------------------- UoW helpers ---------------------------------

    def rw_uow(self) -> DocumentUnitOfWork:
        """
        Create a read-write Unit of Work.

        :returns: Read-write UoW; commits the document on clean exit.
        :rtype: DocumentUnitOfWork
        """
        return self.store.transaction()

    def ro_uow(self) -> DocumentUnitOfWork:
        """
        Create a read-only Unit of Work.

        :returns: Read-only UoW; never writes the document.
        :rtype: DocumentUnitOfWork
        """
        return self.store.transaction(read_only=True)

    # --------------------------- AuthZ --------------------------------

    def ensure_owner(self, actor_id: int | None, owner_id: int, *, msg: str | None = None) -> None:
        """
        Ensure the current actor is the resource owner.

        :param actor_id: Authenticated account id.
        :param owner_id: Expected owner account id.
        :param msg: Optional custom error message.
        :raises AuthorizationError: If actor is not the owner.
        """
        from chirpy.services._shared.errors import AuthorizationError
        from chirpy.services._shared.policies.common import is_owner

        if not is_owner(actor_id=actor_id, owner_id=owner_id):
            raise AuthorizationError(msg or "You can only modify your own resources.")

    @staticmethod
    def now_utc() -> datetime:
        return datetime.now(UTC)
