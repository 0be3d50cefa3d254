"""Unit of Work abstractions and the document-store implementation.

Services open a unit of work (``store.transaction()``) whenever a use-case
must read, decide and write without another thread interleaving.
"""

from .base import UnitOfWork
from .document_uow import DocumentUnitOfWork

__all__ = [
    "UnitOfWork",
    "DocumentUnitOfWork",
]
