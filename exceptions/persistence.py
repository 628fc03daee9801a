"""
Persistence-related exceptions.
"""

from .base import PersistenceException


class RecordNotFoundException(PersistenceException):
    """Raised when updating or deleting a record that does not exist."""

    def __init__(self, kind: str, record_id: int | str):
        super().__init__(
            f"{kind} record {record_id} not found",
            details={'kind': kind, 'record_id': record_id}
        )
        self.kind = kind
        self.record_id = record_id


class StorageOperationException(PersistenceException):
    """Raised when the underlying backend fails (database error, unreadable file)."""

    def __init__(self, operation: str, kind: str, reason: str):
        super().__init__(
            f"Storage {operation} on {kind} failed: {reason}",
            details={'operation': operation, 'kind': kind, 'reason': reason}
        )
        self.operation = operation
        self.kind = kind
        self.reason = reason
