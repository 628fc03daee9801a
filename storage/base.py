"""
Persistence collaborator interface.

The order, cart, catalog and role logic is written once against StorageBackend
and never branches on which backend is active. Records travel as plain dicts
keyed by column name; ids are assigned by the backend.
"""

from abc import ABC, abstractmethod
from typing import Any, NamedTuple, Sequence

from enums.entity_kind import EntityKind


class Ordering(NamedTuple):
    field: str
    descending: bool = False


# Field equality map. A list/tuple/set value means "field is one of these".
RecordFilter = dict[str, Any]


class StorageBackend(ABC):

    @abstractmethod
    async def insert(self, kind: EntityKind, record: dict) -> int:
        """Store a new record and return the id assigned to it."""

    @abstractmethod
    async def insert_many(self, kind: EntityKind, records: Sequence[dict]) -> list[int]:
        """Store several records in one write; either all are stored or none."""

    @abstractmethod
    async def update(self, kind: EntityKind, record_id: int, patch: dict) -> None:
        """Apply a partial update. Raises RecordNotFoundException for unknown ids."""

    @abstractmethod
    async def delete(self, kind: EntityKind, record_id: int) -> None:
        """Remove a record. Raises RecordNotFoundException for unknown ids."""

    @abstractmethod
    async def get(self, kind: EntityKind, record_id: int) -> dict | None:
        pass

    @abstractmethod
    async def query(self, kind: EntityKind, filter: RecordFilter | None = None,
                    order_by: Sequence[Ordering] | None = None) -> list[dict]:
        pass


def matches_filter(record: dict, filter: RecordFilter | None) -> bool:
    if not filter:
        return True
    for field, expected in filter.items():
        value = record.get(field)
        if isinstance(expected, (list, tuple, set, frozenset)):
            if value not in expected:
                return False
        elif value != expected:
            return False
    return True
