"""
Storage Package

Two interchangeable implementations of the persistence collaborator:
- SQLStorage: relational backend (async SQLAlchemy)
- LocalStorage: JSON key-value file (local-storage variant)
"""

import config
from enums.storage_backend import StorageBackendType
from storage.base import StorageBackend, Ordering, RecordFilter
from storage.local import LocalStorage
from storage.sql import SQLStorage


def get_storage(backend: StorageBackendType | None = None) -> StorageBackend:
    """Build the backend selected by STORAGE_BACKEND (or the explicit argument)."""
    backend = backend or config.STORAGE_BACKEND
    if backend == StorageBackendType.LOCAL:
        return LocalStorage()
    return SQLStorage()


__all__ = [
    'StorageBackend',
    'Ordering',
    'RecordFilter',
    'LocalStorage',
    'SQLStorage',
    'get_storage',
]
