"""Application tags – TagContext.

One context is created per tag evaluation. It carries the collaborators a
handler needs (warning registry, clock, nested-context resolver) and
collects every diagnostic the evaluation produced. Each diagnostic is also
logged as a ``tag.diagnostic`` structlog event.
"""
from __future__ import annotations

import threading
from collections.abc import Callable
from datetime import datetime
from typing import Any

from flag_tags.application.diagnostics import Diagnostic, DiagnosticKind
from flag_tags.application.warnings import TagWarning, WarningRegistry
from flag_tags.kernel.time import Clock
from flag_tags.kernel.types import ObjectValue
from flag_tags.observability.logging import get_logger

ContextResolver = Callable[[str], Any]


class TagContext:
    """Per-evaluation context.

    Parameters
    ----------
    warnings:
        The registry legacy and debug-only tags fire into.
    clock:
        Time source for expiry checks; defaults to the registry's clock.
    context_resolver:
        Evaluates the raw text inside ``[...]`` (which may itself be a tag).
        Defaults to returning the text unchanged.
    """

    def __init__(
        self,
        warnings: WarningRegistry,
        clock: Clock | None = None,
        *,
        context_resolver: ContextResolver | None = None,
        logger: Any = None,
    ) -> None:
        self.warnings = warnings
        self.clock: Clock = clock or warnings.clock
        self._resolver = context_resolver
        self._log = logger or get_logger(__name__)
        self._diagnostics: list[Diagnostic] = []
        self._lock = threading.Lock()

    def now(self) -> datetime:
        return self.clock.now()

    def resolve_context(self, raw: str) -> str:
        if self._resolver is None:
            return raw
        value = self._resolver(raw)
        if isinstance(value, ObjectValue):
            return value.identify()
        return str(value)

    # ------------------------------------------------------------------
    # Diagnostics
    # ------------------------------------------------------------------

    def report(
        self,
        kind: DiagnosticKind,
        message: str,
        *,
        segment: str | None = None,
        warning_id: str | None = None,
        position: int | None = None,
    ) -> Diagnostic:
        diagnostic = Diagnostic(
            kind=kind, message=message, segment=segment, warning_id=warning_id, position=position
        )
        with self._lock:
            self._diagnostics.append(diagnostic)
        log = self._log.error if kind.is_error else self._log.warning
        log(
            "tag.diagnostic",
            kind=kind.value,
            segment=segment,
            warning_id=warning_id,
            position=position,
            message=message,
        )
        return diagnostic

    def report_warning(self, warning: TagWarning) -> None:
        self.report(warning.diagnostic_kind, warning.message, warning_id=warning.warning_id)

    @property
    def diagnostics(self) -> list[Diagnostic]:
        with self._lock:
            return list(self._diagnostics)

    @property
    def errors(self) -> list[Diagnostic]:
        return [d for d in self.diagnostics if d.kind.is_error]

    def of_kind(self, kind: DiagnosticKind) -> list[Diagnostic]:
        return [d for d in self.diagnostics if d.kind is kind]

    def clear(self) -> None:
        with self._lock:
            self._diagnostics.clear()


__all__ = ["ContextResolver", "TagContext"]
