"""Application tags – Attribute, the read cursor over an AttributeChain.

Positions are 1-based and relative to the cursor: ``has_context(1)`` asks
about the segment being handled, ``get_attribute_without_context(2)`` peeks
at the one after it. Only :meth:`Attribute.fulfill` moves the cursor.
"""
from __future__ import annotations

from flag_tags.application.diagnostics import Diagnostic, DiagnosticKind
from flag_tags.application.tags.chain import AttributeChain, AttributeSegment
from flag_tags.application.tags.context import TagContext


class Attribute:
    def __init__(self, chain: AttributeChain, context: TagContext) -> None:
        self.chain = chain
        self.context = context
        self._cursor = 0

    def _segment(self, n: int) -> AttributeSegment | None:
        index = self._cursor + n - 1
        if n < 1 or index >= len(self.chain):
            return None
        return self.chain[index]

    @property
    def current(self) -> AttributeSegment | None:
        return self._segment(1)

    @property
    def remaining(self) -> int:
        return len(self.chain) - self._cursor

    @property
    def is_complete(self) -> bool:
        return self._cursor >= len(self.chain)

    def has_context(self, n: int = 1) -> bool:
        segment = self._segment(n)
        return segment is not None and segment.has_context

    def get_raw_context(self, n: int = 1) -> str | None:
        segment = self._segment(n)
        if segment is None or not segment.has_context:
            return None
        return segment.context[0]

    def get_context(self, n: int = 1) -> str | None:
        """Return the evaluated first context argument of segment *n*."""
        raw = self.get_raw_context(n)
        if raw is None:
            return None
        return self.context.resolve_context(raw)

    def get_attribute_without_context(self, n: int = 1) -> str:
        segment = self._segment(n)
        return segment.name if segment is not None else ""

    def fulfill(self, n: int = 1) -> None:
        self._cursor = min(self._cursor + n, len(self.chain))

    def echo_error(self, message: str, kind: DiagnosticKind = DiagnosticKind.ERROR) -> Diagnostic:
        segment = self.current
        return self.context.report(kind, message, segment=segment.name if segment else None)

    def __repr__(self) -> str:
        return f"Attribute({self.chain.raw!r}, cursor={self._cursor})"


__all__ = ["Attribute"]
