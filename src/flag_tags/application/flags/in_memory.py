"""Application flags – InMemoryFlagTracker."""
from __future__ import annotations

import threading
from datetime import datetime
from typing import Any

from flag_tags.application.flags.record import FlagRecord
from flag_tags.application.flags.tracker import AbstractFlagTracker
from flag_tags.kernel.time import Clock, SystemClock
from flag_tags.kernel.types import TimestampValue
from flag_tags.observability.logging import get_logger


class InMemoryFlagTracker(AbstractFlagTracker):
    """Dict-backed tracker, safe to share between threads.

    Expired records are skipped on read and stay stored until overwritten or
    :meth:`purge_expired` runs, so :meth:`get_flag_expiration_time` can still
    report when they lapsed. Keys are matched exactly (case-sensitive) and
    listed in insertion order.
    """

    def __init__(self, clock: Clock | None = None, *, logger: Any = None) -> None:
        self._clock: Clock = clock or SystemClock()
        self._records: dict[str, FlagRecord] = {}
        self._lock = threading.RLock()
        self._log = logger or get_logger(__name__)

    def _now(self) -> datetime:
        return self._clock.now()

    def now(self) -> TimestampValue:
        return TimestampValue(self._now())

    def get_flag_record(self, key: str) -> FlagRecord | None:
        """Raw record for *key*, expired or not."""
        with self._lock:
            return self._records.get(key)

    def get_flag_value(self, key: str) -> Any | None:
        now = self._now()
        with self._lock:
            record = self._records.get(key)
            if record is None or record.is_expired(now):
                return None
            return record.value

    def get_flag_expiration_time(self, key: str) -> TimestampValue | None:
        with self._lock:
            record = self._records.get(key)
            return record.expires_at if record is not None else None

    def list_all_flags(self) -> list[str]:
        now = self._now()
        with self._lock:
            return [key for key, record in self._records.items() if not record.is_expired(now)]

    def set_flag(self, key: str, value: Any | None, expiration: TimestampValue | None = None) -> None:
        with self._lock:
            if value is None:
                removed = self._records.pop(key, None) is not None
                self._log.debug("flag.removed", key=key, existed=removed)
                return
            self._records[key] = FlagRecord(value, expiration)
        self._log.debug(
            "flag.set",
            key=key,
            expires_at=expiration.identify() if expiration is not None else None,
        )

    def purge_expired(self) -> int:
        """Physically drop expired records; return how many were removed."""
        now = self._now()
        with self._lock:
            expired = [key for key, record in self._records.items() if record.is_expired(now)]
            for key in expired:
                del self._records[key]
        if expired:
            self._log.debug("flag.purged", count=len(expired))
        return len(expired)

    def snapshot(self) -> dict[str, Any]:
        """Live ``{key: value}`` copy."""
        now = self._now()
        with self._lock:
            return {key: r.value for key, r in self._records.items() if not r.is_expired(now)}

    def __len__(self) -> int:
        return len(self.list_all_flags())


__all__ = ["InMemoryFlagTracker"]
