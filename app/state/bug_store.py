"""
Bug Store
=========
Owns the single "current bugs" slot shown by the dashboard.

Rules:
    - The slot holds an immutable tuple and is only ever swapped whole
    - Reloads are serialised; at most one file read is in flight
    - A failed or timed-out reload keeps the previous tuple (possibly empty)
      and re-raises so the caller can report it
"""
import asyncio
import logging
from typing import Iterable, Optional, Tuple

from app.core.exceptions import BugLoadError
from app.models.bug_record import BugRecord
from app.services.bug_loader import load_bugs_async

logger = logging.getLogger(__name__)


class BugStore:
    """
    In-memory holder for the loaded bug collection.

    Usage:
        store = BugStore("bug_reports.json", timeout=5.0)
        await store.reload()
        store.records   # tuple of BugRecord
    """

    def __init__(self, path: str, timeout: float = 5.0) -> None:
        self.path = path
        self.timeout = timeout
        self._records: Tuple[BugRecord, ...] = ()
        self._lock = asyncio.Lock()
        self.last_error: Optional[str] = None
        self.load_count = 0

    @property
    def records(self) -> Tuple[BugRecord, ...]:
        return self._records

    def replace(self, records: Iterable[BugRecord]) -> None:
        self._records = tuple(records)

    async def reload(self) -> Tuple[BugRecord, ...]:
        async with self._lock:
            try:
                bugs = await asyncio.wait_for(load_bugs_async(self.path), timeout=self.timeout)
            except BugLoadError as exc:
                self.last_error = str(exc)
                logger.error("Error fetching bugs: %s (keeping %d loaded)", exc, len(self._records))
                raise
            except asyncio.TimeoutError:
                self.last_error = f"Timed out after {self.timeout:.1f}s: {self.path}"
                logger.warning("Bug reload %s; keeping %d loaded", self.last_error, len(self._records))
                raise

            self.replace(bugs)
            self.last_error = None
            self.load_count += 1
            return self._records
