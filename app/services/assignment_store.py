# app/services/assignment_store.py
import logging
from datetime import datetime, timezone
from typing import Callable, List, Optional, Tuple

from app.models.assignment import Assignment
from app.services.dates import utc_timestamp
from app.services.kv import KVNamespace

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class AssignmentStore:
    """
    Record store adapter: one ``Assignment`` per date key.

    Every method is a single logical operation against the namespace.
    Nothing is retried, and concurrent writes to one date are
    last-write-wins.
    """

    def __init__(self, kv: KVNamespace, clock: Callable[[], datetime] = _utcnow):
        self.kv = kv
        self.clock = clock

    async def get(self, date: str) -> Optional[Assignment]:
        """Return the record for ``date`` or None when there is none."""
        raw = await self.kv.get(date)
        if raw is None:
            return None
        return Assignment.model_validate_json(raw)

    async def put(self, date: str, content: str) -> Tuple[Assignment, bool]:
        """
        Create or replace the record for ``date``.

        Returns the stored record and True when it did not exist before.
        ``createdAt`` is carried over from the existing record.
        """
        existing = await self.get(date)
        now = utc_timestamp(self.clock())

        record = Assignment(
            date=date,
            content=content.strip(),
            created_at=existing.created_at if existing else now,
            updated_at=now,
        )
        await self.kv.put(date, record.to_json())
        logger.info(f"{'Updated' if existing else 'Created'} assignment for {date}")
        return record, existing is None

    async def delete(self, date: str) -> bool:
        removed = await self.kv.delete(date)
        if removed:
            logger.info(f"Deleted assignment for {date}")
        return removed

    async def list(self) -> List[str]:
        """Date keys in ascending order, at most one namespace page."""
        return await self.kv.list_keys()
