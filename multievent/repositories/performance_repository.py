"""
Performance Repository - Multi-Event Scoring
multievent/repositories/performance_repository.py

Data access layer for Performance records.
"""

import copy
import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from multievent.core.exceptions import EntityNotFoundException
from multievent.models.enumerations import EventType
from multievent.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class PerformanceRepository(BaseRepository):
    """Repository for Performance CRUD operations."""

    ENTITY_NAME = "Performance"

    def create(
        self,
        event_type: EventType,
        event_results: List[Dict[str, Any]],
        total_score: int,
        label: Optional[str] = None,
        date: Optional[datetime] = None,
    ) -> Dict[str, Any]:
        """
        Create a new performance.

        Args:
            event_type: Competition type
            event_results: EventResult dicts in competition order
            total_score: Sum of event points
            label: Optional label
            date: Save timestamp (defaults to now, UTC)

        Returns:
            Created performance dict
        """
        record = self._insert({
            "event_type": EventType(event_type).value,
            "event_results": event_results,
            "total_score": total_score,
            "label": label,
            "date": self.normalize_timestamp(date) or datetime.now(timezone.utc),
        })
        logger.info(
            "Performance %s created (%s, %s points)",
            record["id"], record["event_type"], total_score,
        )
        return record

    def get_by_id(self, performance_id: int) -> Optional[Dict[str, Any]]:
        """
        Retrieve a performance by ID.

        Returns:
            Performance dict or None if not found
        """
        return self._get(performance_id)

    def get_all(self, event_type: Optional[str] = None) -> List[Dict[str, Any]]:
        """
        Retrieve performances, newest first.

        Args:
            event_type: Optional competition filter; None or "all" returns everything

        Returns:
            List of performance dicts
        """
        rows = self._all()
        if event_type and event_type != "all":
            wanted = EventType(event_type).value
            rows = [r for r in rows if r["event_type"] == wanted]
        return sorted(rows, key=lambda r: (r["date"], r["id"]), reverse=True)

    def get_history(self) -> List[Dict[str, Any]]:
        """All performances, oldest first."""
        return sorted(self._all(), key=lambda r: (r["date"], r["id"]))

    def update(
        self,
        performance_id: int,
        event_type: EventType,
        event_results: List[Dict[str, Any]],
        total_score: int,
        label: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        Replace a performance, keeping its id and original date.

        Returns:
            Updated performance dict

        Raises:
            EntityNotFoundException: No performance with that id
        """
        with self.transaction() as records:
            existing = records.get(performance_id)
            if existing is None:
                raise EntityNotFoundException(self.ENTITY_NAME, performance_id)
            updated = {
                "id": performance_id,
                "event_type": EventType(event_type).value,
                "event_results": copy.deepcopy(event_results),
                "total_score": total_score,
                "label": label,
                "date": existing["date"],
            }
            records[performance_id] = updated
            logger.info("Performance %s updated (%s points)", performance_id, total_score)
            return copy.deepcopy(updated)

    def delete(self, performance_id: int) -> bool:
        """
        Delete a performance.

        Returns:
            True if a record was removed
        """
        with self.transaction() as records:
            removed = records.pop(performance_id, None) is not None
        if removed:
            logger.info("Performance %s deleted", performance_id)
        return removed
