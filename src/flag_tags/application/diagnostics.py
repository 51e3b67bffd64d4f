"""Application diagnostics – the out-of-band channel tags report through."""
from __future__ import annotations

import dataclasses
from enum import Enum


class DiagnosticKind(str, Enum):
    MISSING_CONTEXT = "missing_context"
    PARSE_ERROR = "parse_error"
    UNKNOWN_ATTRIBUTE = "unknown_attribute"
    DEPRECATED_USAGE = "deprecated_usage"
    DEBUG_ONLY_USAGE = "debug_only_usage"
    WARNING = "warning"
    ERROR = "error"

    @property
    def is_error(self) -> bool:
        return self in _ERROR_KINDS


_ERROR_KINDS = frozenset(
    {
        DiagnosticKind.MISSING_CONTEXT,
        DiagnosticKind.PARSE_ERROR,
        DiagnosticKind.UNKNOWN_ATTRIBUTE,
        DiagnosticKind.ERROR,
    }
)


@dataclasses.dataclass(frozen=True)
class Diagnostic:
    """One recorded error or warning."""
    kind: DiagnosticKind
    message: str
    segment: str | None = None
    warning_id: str | None = None
    position: int | None = None


__all__ = ["Diagnostic", "DiagnosticKind"]
