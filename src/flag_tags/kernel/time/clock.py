"""Kernel time – Clock protocol + implementations.

Flag expiry and warning cooldowns both read the time through a :class:`Clock`
so tests can pin or step it.
"""
from __future__ import annotations

import threading
from datetime import UTC, datetime, timedelta
from typing import Protocol


class Clock(Protocol):
    """Port: the source of "now" for expiry checks and cooldowns."""

    def now(self) -> datetime: ...


class SystemClock:
    """Production clock that delegates to ``datetime.now(UTC)``."""

    def now(self) -> datetime:
        return datetime.now(UTC)


def _require_aware(instant: datetime) -> datetime:
    if instant.tzinfo is None:
        raise ValueError("FrozenClock requires a timezone-aware datetime")
    return instant


class FrozenClock:
    """Test clock pinned to an instant; only :meth:`advance` and :meth:`set` move it."""

    def __init__(self, fixed: datetime) -> None:
        self._fixed = _require_aware(fixed)
        self._lock = threading.Lock()

    def now(self) -> datetime:
        with self._lock:
            return self._fixed

    def advance(self, **kwargs: int | float) -> None:
        """Advance the frozen time by the given ``timedelta`` kwargs."""
        with self._lock:
            self._fixed += timedelta(**kwargs)

    def set(self, instant: datetime) -> None:
        instant = _require_aware(instant)
        with self._lock:
            self._fixed = instant


__all__ = ["Clock", "FrozenClock", "SystemClock"]
