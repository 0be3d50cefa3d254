"""
Persistence adapters.

A single JSON file holds every entity. :class:`DocumentStore` owns that file
and hands out units of work for read-modify-write sequences.
"""

from chirpy.repositories.document_store import DocumentStore
from chirpy.repositories.errors import (
    AccountNotStoredError,
    CorruptionError,
    StoreError,
    StoreIOError,
)

__all__ = [
    "AccountNotStoredError",
    "CorruptionError",
    "DocumentStore",
    "StoreError",
    "StoreIOError",
]
