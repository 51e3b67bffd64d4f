"""Application warnings – WarningRegistry.

The registry is an ordinary object handed to every
:class:`~flag_tags.application.tags.TagContext`; there is no module-level
instance. Tests build a fresh one (or call :meth:`WarningRegistry.reset`).
"""
from __future__ import annotations

import threading
from collections.abc import Iterator

from flag_tags.application.diagnostics import DiagnosticKind
from flag_tags.application.warnings.warning import (
    DeprecatedTagWarning,
    SlowWarning,
    TagWarning,
    WarningSink,
)
from flag_tags.config.settings import FlagTagSettings
from flag_tags.kernel.time import Clock, SystemClock

FLAG_IS_EXPIRED_TAG = "flag_is_expired_tag"
FLAG_EXPIRATION_TAG = "flag_expiration_tag"
LIST_FLAGS_TAG = "list_flags_tag"


class WarningRegistry:
    """Holds every warning a tag evaluation may fire, keyed by id."""

    def __init__(self, clock: Clock | None = None, *, enabled: bool = True) -> None:
        self.clock: Clock = clock or SystemClock()
        self._warnings: dict[str, TagWarning] = {}
        self._suppressed: set[str] = set()
        self._enabled = enabled
        self._lock = threading.Lock()

    def register(self, warning: TagWarning) -> TagWarning:
        with self._lock:
            if warning.warning_id in self._warnings:
                raise ValueError(f"Warning {warning.warning_id!r} is already registered")
            self._warnings[warning.warning_id] = warning
        return warning

    def get(self, warning_id: str) -> TagWarning:
        try:
            return self._warnings[warning_id]
        except KeyError:
            raise KeyError(f"Unknown warning {warning_id!r}") from None

    def __contains__(self, warning_id: object) -> bool:
        return warning_id in self._warnings

    def __iter__(self) -> Iterator[TagWarning]:
        return iter(list(self._warnings.values()))

    def ids(self) -> list[str]:
        return list(self._warnings)

    def warn(self, warning_id: str, context: WarningSink) -> bool:
        """Fire the warning *warning_id* into *context*.

        An id that was never registered does not fire and returns ``False``.
        """
        warning = self._warnings.get(warning_id)
        if warning is None:
            return False
        return warning.warn(context)

    # ------------------------------------------------------------------
    # Suppression
    # ------------------------------------------------------------------

    def allows(self, warning_id: str) -> bool:
        with self._lock:
            return self._enabled and warning_id not in self._suppressed

    def suppress(self, warning_id: str) -> None:
        with self._lock:
            if warning_id not in self._warnings:
                raise KeyError(f"Unknown warning {warning_id!r}")
            self._suppressed.add(warning_id)

    def unsuppress(self, warning_id: str) -> None:
        with self._lock:
            self._suppressed.discard(warning_id)

    def disable(self) -> None:
        with self._lock:
            self._enabled = False

    def enable(self) -> None:
        with self._lock:
            self._enabled = True

    @property
    def enabled(self) -> bool:
        with self._lock:
            return self._enabled

    def reset(self) -> None:
        """Clear cooldowns, one-shot state, fire counts and suppressions."""
        with self._lock:
            self._suppressed.clear()
        for warning in self:
            warning.reset()


def build_default_registry(
    clock: Clock | None = None,
    settings: FlagTagSettings | None = None,
) -> WarningRegistry:
    """Return a registry holding the built-in flag tag warnings."""
    settings = settings or FlagTagSettings()
    registry = WarningRegistry(clock, enabled=settings.warnings_enabled)
    registry.register(
        DeprecatedTagWarning(
            FLAG_IS_EXPIRED_TAG,
            "The 'flag[...].is_expired' tag is deprecated.",
            replacement="has_flag[...]",
            cooldown_seconds=settings.deprecation_warning_cooldown_seconds,
        )
    )
    registry.register(
        DeprecatedTagWarning(
            FLAG_EXPIRATION_TAG,
            "The 'flag[...].expiration' tag is deprecated.",
            replacement="flag_expiration[...]",
            cooldown_seconds=settings.deprecation_warning_cooldown_seconds,
        )
    )
    registry.register(
        SlowWarning(
            LIST_FLAGS_TAG,
            "The list_flags tag is meant for testing/debugging only. Do not use it in scripts "
            "(ignore this warning if using for testing reasons).",
            cooldown_seconds=settings.list_flags_warning_cooldown_seconds,
            diagnostic_kind=DiagnosticKind.DEBUG_ONLY_USAGE,
        )
    )
    return registry


__all__ = [
    "FLAG_EXPIRATION_TAG",
    "FLAG_IS_EXPIRED_TAG",
    "LIST_FLAGS_TAG",
    "WarningRegistry",
    "build_default_registry",
]
