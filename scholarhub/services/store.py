"""
Entity stores: the persistence boundary for scholarships, universities and bookmarks.

Callers only depend on the EntityStore protocol, so the in-memory backend used by
default can be swapped for the Supabase backend without touching them.
"""
import asyncio
import logging
from datetime import date
from enum import Enum
from typing import Any, Callable, Generic, Iterable, Protocol, TypeVar

from pydantic import BaseModel

from ..errors import NotFoundError

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)

Predicate = Callable[[Any], bool]


class EntityStore(Protocol[T]):
    """Minimal store contract shared by every backend."""

    async def insert(self, record: BaseModel | dict) -> T: ...
    async def update(self, record_id: str, changes: dict) -> T: ...
    async def find_by_id(self, record_id: str) -> T | None: ...
    async def scan(self, predicate: Predicate | None = None) -> list[T]: ...
    async def delete(self, record_id: str) -> bool: ...


def _fields(record: BaseModel | dict) -> dict:
    if isinstance(record, BaseModel):
        data = record.model_dump()
    else:
        data = dict(record)
    data.pop("id", None)
    return data


class InMemoryStore(Generic[T]):
    """
    Ordered in-process collection guarded by a single lock.

    Ids are "<prefix><n>" from a monotonic counter, skipping ids already taken
    by seed records.
    """

    def __init__(self, model: type[T], prefix: str, seed: Iterable[T] = ()):
        self._model = model
        self._prefix = prefix
        self._records: list[T] = []
        self._ids: set[str] = set()
        self._counter = 0
        self._lock = asyncio.Lock()

        for record in seed:
            self._append(record)
        logger.debug(f"{model.__name__} store ready with {len(self._records)} seed records")

    def __len__(self) -> int:
        return len(self._records)

    def _append(self, record: T) -> None:
        if record.id in self._ids:
            raise RuntimeError(f"Duplicate {self._model.__name__} id: {record.id}")
        self._records.append(record)
        self._ids.add(record.id)

    def _next_id(self) -> str:
        while True:
            self._counter += 1
            candidate = f"{self._prefix}{self._counter}"
            if candidate not in self._ids:
                return candidate

    def _index(self, record_id: str) -> int | None:
        for idx, record in enumerate(self._records):
            if record.id == record_id:
                return idx
        return None

    async def insert(self, record: BaseModel | dict) -> T:
        async with self._lock:
            created = self._model.model_validate({**_fields(record), "id": self._next_id()})
            self._append(created)
        logger.debug(f"Inserted {self._model.__name__} {created.id}")
        return created

    async def update(self, record_id: str, changes: dict) -> T:
        changes = {k: v for k, v in changes.items() if k != "id"}
        async with self._lock:
            idx = self._index(record_id)
            if idx is None:
                raise NotFoundError(f"{self._model.__name__} {record_id} not found")
            updated = self._model.model_validate({**self._records[idx].model_dump(), **changes})
            self._records[idx] = updated
        logger.debug(f"Updated {self._model.__name__} {record_id}: {sorted(changes)}")
        return updated

    async def find_by_id(self, record_id: str) -> T | None:
        async with self._lock:
            idx = self._index(record_id)
            return None if idx is None else self._records[idx]

    async def scan(self, predicate: Predicate | None = None) -> list[T]:
        async with self._lock:
            if predicate is None:
                return list(self._records)
            return [r for r in self._records if predicate(r)]

    async def delete(self, record_id: str) -> bool:
        async with self._lock:
            idx = self._index(record_id)
            if idx is None:
                return False
            removed = self._records.pop(idx)
            self._ids.discard(removed.id)
        logger.debug(f"Deleted {self._model.__name__} {record_id}")
        return True


def _column_value(value):
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, date):
        return value.isoformat()
    return value


def _jsonable(changes: dict) -> dict:
    """Dates and enums as the plain values the table columns hold."""
    return {k: _column_value(v) for k, v in changes.items()}


class SupabaseStore(Generic[T]):
    """
    Store backed by a Supabase table.

    The table assigns ids itself and is expected to carry a `created_at`
    column, which keeps scans in insertion order.
    """

    def __init__(self, client, table: str, model: type[T]):
        self._client = client
        self._table = table
        self._model = model

    def _query(self):
        return self._client.table(self._table)

    async def insert(self, record: BaseModel | dict) -> T:
        payload = _jsonable(_fields(record))
        logger.debug(f"Inserting into {self._table}: {list(payload)}")
        result = self._query().insert(payload).execute()
        if not result.data:
            raise RuntimeError(f"Insert into {self._table} returned no row")
        return self._model.model_validate(result.data[0])

    async def update(self, record_id: str, changes: dict) -> T:
        payload = _jsonable({k: v for k, v in changes.items() if k != "id"})
        logger.debug(f"Updating {self._table} {record_id}: {list(payload)}")
        result = self._query().update(payload).eq("id", record_id).execute()
        if not result.data:
            raise NotFoundError(f"{self._model.__name__} {record_id} not found")
        return self._model.model_validate(result.data[0])

    async def find_by_id(self, record_id: str) -> T | None:
        result = self._query().select("*").eq("id", record_id).limit(1).execute()
        if not result.data:
            return None
        return self._model.model_validate(result.data[0])

    async def scan(self, predicate: Predicate | None = None) -> list[T]:
        result = self._query().select("*").order("created_at").execute()
        records = [self._model.model_validate(row) for row in result.data or []]
        if predicate is None:
            return records
        return [r for r in records if predicate(r)]

    async def delete(self, record_id: str) -> bool:
        result = self._query().delete().eq("id", record_id).execute()
        return bool(result.data)
