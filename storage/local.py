"""
Local key-value storage backend.

Mirrors the browser local-storage variant of the storefront: every entity kind
is kept as a list of JSON records in a single file, next to a per-kind id
sequence. Writes replace the whole file atomically (write to temp, then rename).
"""

import asyncio
import json
import logging
from datetime import date, datetime
from enum import Enum
from pathlib import Path
from typing import Sequence

import config
from enums.entity_kind import EntityKind
from exceptions.persistence import RecordNotFoundException, StorageOperationException
from storage.base import StorageBackend, Ordering, RecordFilter, matches_filter

logger = logging.getLogger(__name__)


def _json_default(value):
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, Enum):
        return value.value
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def _sort_key(field: str):
    # None sorts before any value, like NULLS FIRST
    def key(record: dict):
        value = record.get(field)
        if isinstance(value, Enum):
            value = value.value
        return (value is not None, value if value is not None else 0)
    return key


class LocalStorage(StorageBackend):

    def __init__(self, path: str | Path | None = None):
        self._path = Path(path or config.LOCAL_STORAGE_PATH)
        self._lock = asyncio.Lock()

    @property
    def path(self) -> Path:
        return self._path

    def _read(self) -> dict:
        if not self._path.exists():
            return {"sequences": {}, "records": {}}
        with self._path.open("r", encoding="utf-8") as f:
            return json.load(f)

    def _write(self, data: dict) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self._path.with_suffix(self._path.suffix + ".tmp")
        with tmp_path.open("w", encoding="utf-8") as f:
            json.dump(data, f, default=_json_default, ensure_ascii=False)
        tmp_path.replace(self._path)

    async def _load(self, operation: str, kind: EntityKind) -> dict:
        try:
            return await asyncio.to_thread(self._read)
        except (OSError, ValueError) as e:
            logger.error(f"Local storage {operation} on {kind.value} failed reading {self._path}: {e}")
            raise StorageOperationException(operation, kind.value, str(e)) from e

    async def _save(self, operation: str, kind: EntityKind, data: dict) -> None:
        try:
            await asyncio.to_thread(self._write, data)
        except (OSError, TypeError, ValueError) as e:
            logger.error(f"Local storage {operation} on {kind.value} failed writing {self._path}: {e}")
            raise StorageOperationException(operation, kind.value, str(e)) from e

    @staticmethod
    def _normalize(record: dict) -> dict:
        # Round-trip through JSON so in-memory copies look exactly like reloaded ones
        return json.loads(json.dumps(record, default=_json_default))

    async def insert(self, kind: EntityKind, record: dict) -> int:
        ids = await self.insert_many(kind, [record])
        return ids[0]

    async def insert_many(self, kind: EntityKind, records: Sequence[dict]) -> list[int]:
        async with self._lock:
            data = await self._load("insert", kind)
            next_id = data["sequences"].get(kind.value, 0)
            rows = data["records"].setdefault(kind.value, [])
            ids = []
            for record in records:
                next_id += 1
                row = self._normalize({**record, "id": next_id})
                rows.append(row)
                ids.append(next_id)
            data["sequences"][kind.value] = next_id
            await self._save("insert", kind, data)
            return ids

    async def update(self, kind: EntityKind, record_id: int, patch: dict) -> None:
        async with self._lock:
            data = await self._load("update", kind)
            for row in data["records"].get(kind.value, []):
                if row.get("id") == record_id:
                    row.update(self._normalize({k: v for k, v in patch.items() if k != "id"}))
                    await self._save("update", kind, data)
                    return
            raise RecordNotFoundException(kind.value, record_id)

    async def delete(self, kind: EntityKind, record_id: int) -> None:
        async with self._lock:
            data = await self._load("delete", kind)
            rows = data["records"].get(kind.value, [])
            remaining = [row for row in rows if row.get("id") != record_id]
            if len(remaining) == len(rows):
                raise RecordNotFoundException(kind.value, record_id)
            data["records"][kind.value] = remaining
            await self._save("delete", kind, data)

    async def get(self, kind: EntityKind, record_id: int) -> dict | None:
        data = await self._load("get", kind)
        for row in data["records"].get(kind.value, []):
            if row.get("id") == record_id:
                return row
        return None

    async def query(self, kind: EntityKind, filter: RecordFilter | None = None,
                    order_by: Sequence[Ordering] | None = None) -> list[dict]:
        data = await self._load("query", kind)
        rows = [row for row in data["records"].get(kind.value, []) if matches_filter(row, filter)]
        # Stable sorts applied from the least to the most significant key
        for ordering in reversed(list(order_by or [])):
            rows.sort(key=_sort_key(ordering.field), reverse=ordering.descending)
        return rows
