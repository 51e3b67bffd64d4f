"""Application warnings – TagWarning and its throttled variants.

A warning is created once, registered on a
:class:`~flag_tags.application.warnings.WarningRegistry` and then fired from
any number of threads. The suppression state (last-fired instant, fired-once
flag) lives on the instance and is only read and written under its lock, so
two threads can never both win the same cooldown window.
"""
from __future__ import annotations

import threading
from datetime import datetime, timedelta
from enum import Enum
from typing import Any, Protocol

from flag_tags.application.diagnostics import DiagnosticKind


class WarningKind(str, Enum):
    STANDARD = "standard"
    DEPRECATION = "deprecation"
    RATE_LIMITED = "rate_limited"


class WarningSink(Protocol):
    """Anything a warning can be fired into (normally a ``TagContext``)."""

    warnings: Any

    def now(self) -> datetime: ...
    def report_warning(self, warning: "TagWarning") -> None: ...


class TagWarning:
    """Standard warning: fires on every call unless its registry mutes it."""

    kind: WarningKind = WarningKind.STANDARD

    def __init__(
        self,
        warning_id: str,
        message: str,
        *,
        diagnostic_kind: DiagnosticKind = DiagnosticKind.WARNING,
    ) -> None:
        self.warning_id = warning_id
        self._message = message
        self.diagnostic_kind = diagnostic_kind
        self.fire_count = 0
        self._lock = threading.Lock()

    @property
    def message(self) -> str:
        return self._message

    def warn(self, context: WarningSink) -> bool:
        """Fire against *context*; return ``True`` if the warning was emitted."""
        if not context.warnings.allows(self.warning_id):
            return False
        with self._lock:
            if not self._should_fire(context.now()):
                return False
            self.fire_count += 1
        context.report_warning(self)
        return True

    def reset(self) -> None:
        with self._lock:
            self.fire_count = 0
            self._reset_state()

    def _should_fire(self, now: datetime) -> bool:
        return True

    def _reset_state(self) -> None:
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.warning_id!r})"


class SlowWarning(TagWarning):
    """Fires at most once per ``cooldown_seconds``, however often it is hit."""

    kind = WarningKind.RATE_LIMITED

    def __init__(
        self,
        warning_id: str,
        message: str,
        *,
        cooldown_seconds: float = 10.0,
        diagnostic_kind: DiagnosticKind = DiagnosticKind.WARNING,
    ) -> None:
        if cooldown_seconds < 0:
            raise ValueError("cooldown_seconds must be >= 0")
        super().__init__(warning_id, message, diagnostic_kind=diagnostic_kind)
        self.cooldown = timedelta(seconds=cooldown_seconds)
        self.last_fired: datetime | None = None

    def _should_fire(self, now: datetime) -> bool:
        if self.last_fired is not None and now < self.last_fired + self.cooldown:
            return False
        self.last_fired = now
        return True

    def _reset_state(self) -> None:
        self.last_fired = None


class OneShotWarning(TagWarning):
    """Fires the first time only, until :meth:`reset`."""

    def __init__(self, warning_id: str, message: str, **kwargs: Any) -> None:
        super().__init__(warning_id, message, **kwargs)
        self.fired = False

    def _should_fire(self, now: datetime) -> bool:
        if self.fired:
            return False
        self.fired = True
        return True

    def _reset_state(self) -> None:
        self.fired = False


class DeprecatedTagWarning(SlowWarning):
    """A legacy tag form that still works but should be replaced."""

    kind = WarningKind.DEPRECATION

    def __init__(
        self,
        warning_id: str,
        message: str,
        *,
        replacement: str | None = None,
        cooldown_seconds: float = 10.0,
    ) -> None:
        super().__init__(
            warning_id,
            message,
            cooldown_seconds=cooldown_seconds,
            diagnostic_kind=DiagnosticKind.DEPRECATED_USAGE,
        )
        self.replacement = replacement

    @property
    def message(self) -> str:
        if self.replacement is None:
            return self._message
        return f"{self._message} Use '{self.replacement}' instead."


__all__ = [
    "DeprecatedTagWarning",
    "OneShotWarning",
    "SlowWarning",
    "TagWarning",
    "WarningKind",
    "WarningSink",
]
