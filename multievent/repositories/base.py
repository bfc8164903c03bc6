"""
Base Repository - Multi-Event Scoring
multievent/repositories/base.py

In-memory keyed store with an incrementing integer id. One lock guards the
map; records are copied on the way in and out so callers never share state
with the store.
"""

import copy
import threading
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Any, Dict, Generator, List, Optional

from multievent.core.exceptions import RepositoryException


class BaseRepository:
    """Base repository over a process-local dict."""

    ENTITY_NAME = "Entity"

    def __init__(self):
        self._records: Dict[int, Dict[str, Any]] = {}
        self._next_id = 1
        self._lock = threading.Lock()

    @contextmanager
    def transaction(self) -> Generator[Dict[int, Dict[str, Any]], None, None]:
        """
        Hold the store lock for a read-modify-write.

        Records that cannot be copied surface as RepositoryException.
        """
        with self._lock:
            try:
                yield self._records
            except (TypeError, copy.Error) as e:
                raise RepositoryException(f"{self.ENTITY_NAME} store error: {e}") from e

    def _allocate_id(self) -> int:
        """Next id; call with the lock held."""
        record_id = self._next_id
        self._next_id += 1
        return record_id

    def _insert(self, data: Dict[str, Any]) -> Dict[str, Any]:
        with self.transaction() as records:
            record = copy.deepcopy(data)
            record_id = self._allocate_id()
            record["id"] = record_id
            records[record_id] = record
            return copy.deepcopy(record)

    def _get(self, record_id: int) -> Optional[Dict[str, Any]]:
        with self.transaction() as records:
            record = records.get(record_id)
            return copy.deepcopy(record) if record is not None else None

    def _all(self) -> List[Dict[str, Any]]:
        with self.transaction() as records:
            return [copy.deepcopy(r) for r in records.values()]

    def exists(self, record_id: int) -> bool:
        with self.transaction() as records:
            return record_id in records

    def count(self) -> int:
        with self.transaction() as records:
            return len(records)

    def clear(self) -> None:
        """Drop every record and restart ids at 1."""
        with self.transaction() as records:
            records.clear()
            self._next_id = 1

    def normalize_timestamp(self, dt: Optional[datetime]) -> Optional[datetime]:
        """Ensure timestamp is UTC-aware."""
        if dt is None:
            return None
        if dt.tzinfo is None:
            return dt.replace(tzinfo=timezone.utc)
        return dt.astimezone(timezone.utc)
