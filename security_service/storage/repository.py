import logging
import threading
from abc import ABC, abstractmethod
from dataclasses import asdict, fields
from typing import Any, Generic, TypeVar

from security_service.storage.supabase import SupabaseClient

logger = logging.getLogger("security-service")

T = TypeVar("T")


class Repository(ABC, Generic[T]):
    """Key-value persistence for records keyed by one of their fields."""

    def __init__(self, record_type: type[T], key: str):
        self.record_type = record_type
        self.key = key

    def key_of(self, record: T) -> Any:
        return getattr(record, self.key)

    @abstractmethod
    def get(self, key: Any) -> T | None:
        """Return the record stored under key, or None."""
        ...

    @abstractmethod
    def put(self, record: T) -> T:
        """Insert or replace the record under its key."""
        ...

    @abstractmethod
    def delete(self, key: Any) -> bool:
        """Delete the record under key. Returns False if nothing was stored."""
        ...

    def ping(self) -> None:
        """Raise if the backing store cannot be reached."""
        return None


class InMemoryRepository(Repository[T]):
    """Process-local repository, used for development and tests."""

    def __init__(self, record_type: type[T], key: str):
        super().__init__(record_type, key)
        self._rows: dict[Any, dict] = {}
        self._lock = threading.Lock()

    def get(self, key: Any) -> T | None:
        with self._lock:
            row = self._rows.get(key)
        return self.record_type(**row) if row is not None else None

    def put(self, record: T) -> T:
        with self._lock:
            self._rows[self.key_of(record)] = asdict(record)
        return record

    def delete(self, key: Any) -> bool:
        with self._lock:
            return self._rows.pop(key, None) is not None


class SupabaseRepository(Repository[T]):
    """Repository backed by a Supabase (PostgREST) table."""

    def __init__(self, client: SupabaseClient, table: str, record_type: type[T], key: str):
        super().__init__(record_type, key)
        self._client = client
        self._table = table
        self._columns = [f.name for f in fields(record_type)]

    def _to_record(self, row: dict) -> T:
        return self.record_type(**{name: row[name] for name in self._columns})

    def get(self, key: Any) -> T | None:
        resp = (
            self._client.table(self._table)
            .select(",".join(self._columns))
            .eq(self.key, key)
            .limit(1)
            .execute()
        )
        if not resp.data:
            return None
        return self._to_record(resp.data[0])

    def put(self, record: T) -> T:
        self._client.table(self._table).upsert(asdict(record)).execute()
        return record

    def delete(self, key: Any) -> bool:
        resp = self._client.table(self._table).delete().eq(self.key, key).execute()
        if not resp.data:
            logger.debug("No row in %s for %s=%s", self._table, self.key, key)
        return bool(resp.data)

    def ping(self) -> None:
        self._client.table(self._table).select(self.key).limit(1).execute()
