"""Application flags – Flaggable protocol and a ready-made flaggable type."""
from __future__ import annotations

from typing import ClassVar, Protocol, runtime_checkable

from flag_tags.application.flags.in_memory import InMemoryFlagTracker
from flag_tags.application.flags.resolver import register_flag_handlers
from flag_tags.application.flags.tracker import AbstractFlagTracker
from flag_tags.application.tags import TagDispatchTable
from flag_tags.kernel.time import Clock
from flag_tags.kernel.types import ObjectValue


@runtime_checkable
class Flaggable(Protocol):
    """Anything that owns flags."""

    def get_flag_tracker(self) -> AbstractFlagTracker: ...


class FlaggableObject(ObjectValue):
    """A named object owning an :class:`InMemoryFlagTracker` (or a supplied one)."""

    tag_processor: ClassVar[TagDispatchTable] = TagDispatchTable("FlaggableObject")

    def __init__(
        self,
        name: str,
        tracker: AbstractFlagTracker | None = None,
        *,
        clock: Clock | None = None,
    ) -> None:
        self.name = name
        self._tracker = tracker if tracker is not None else InMemoryFlagTracker(clock)

    def get_flag_tracker(self) -> AbstractFlagTracker:
        return self._tracker

    def identify(self) -> str:
        return f"flaggable@{self.name}"

    def __repr__(self) -> str:
        return f"FlaggableObject({self.name!r})"


register_flag_handlers(FlaggableObject.tag_processor)


__all__ = ["Flaggable", "FlaggableObject"]
