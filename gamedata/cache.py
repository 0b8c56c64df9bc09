"""
In-memory, single-slot cache for the daily game payload.
An entry stays valid until the calendar day changes in the reference timezone
(America/New_York, where the puzzle is published), regardless of elapsed time.
"""

import logging
import threading
from datetime import date, datetime, timezone
from typing import Callable, NamedTuple
from zoneinfo import ZoneInfo

logger = logging.getLogger(__name__)

REFERENCE_TIMEZONE = "America/New_York"


class CacheEntry(NamedTuple):
    payload: dict
    stored_at: datetime


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class DailyCache:
    """Holds at most one payload plus the instant it was stored."""

    def __init__(self, tz: str = REFERENCE_TIMEZONE):
        self.tz = ZoneInfo(tz)
        self._entry: CacheEntry | None = None
        # Guards reads and replacement of _entry
        self._lock = threading.Lock()
        # Held for the whole miss path in get_or_fetch so only one caller fetches
        self._refresh_lock = threading.Lock()

    def _local_date(self, instant: datetime) -> date:
        """Calendar date of instant in the reference timezone. Naive instants are UTC."""
        if instant.tzinfo is None:
            instant = instant.replace(tzinfo=timezone.utc)
        return instant.astimezone(self.tz).date()

    @property
    def stored_at(self) -> datetime | None:
        with self._lock:
            return self._entry.stored_at if self._entry is not None else None

    def _current_entry(self, now: datetime | None) -> CacheEntry | None:
        """Snapshot the entry under the lock; None unless it was stored today."""
        with self._lock:
            entry = self._entry
        if entry is None:
            return None
        now = now or _utc_now()
        if self._local_date(now) != self._local_date(entry.stored_at):
            return None
        return entry

    def is_valid(self, now: datetime | None = None) -> bool:
        """True if an entry exists and was stored on the same local calendar day as now."""
        return self._current_entry(now) is not None

    def get(self) -> dict | None:
        """Return the stored payload (None if empty). Call is_valid first."""
        with self._lock:
            return self._entry.payload if self._entry is not None else None

    def put(self, payload: dict, now: datetime | None = None) -> None:
        """Replace the entry with (payload, now) as one unit."""
        entry = CacheEntry(payload, now or _utc_now())
        with self._lock:
            self._entry = entry

    def get_or_fetch(
        self,
        fetcher: Callable[[], dict],
        now: datetime | None = None,
    ) -> dict:
        """
        Return the payload if still valid for today; otherwise call fetcher(), store, and return.

        Concurrent misses are serialized: the first caller fetches, the others
        find the fresh entry once the lock is released. If fetcher raises, the
        existing (stale) entry is kept and the error propagates.
        """
        entry = self._current_entry(now)
        if entry is not None:
            logger.info("Using cached data stored_at=%s", entry.stored_at)
            return entry.payload
        with self._refresh_lock:
            entry = self._current_entry(now)
            if entry is not None:
                logger.info("Using cached data stored_at=%s (refreshed by another request)", entry.stored_at)
                return entry.payload
            logger.info("Fetching fresh data stored_at=%s", self.stored_at)
            value = fetcher()
            self.put(value, now)
            return value

    def clear(self) -> None:
        """Drop the entry (e.g. for tests)."""
        with self._lock:
            self._entry = None
