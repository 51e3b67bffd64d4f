"""ObjectValue – common contract of every value a tag can return."""

from __future__ import annotations

import abc


class ObjectValue(abc.ABC):
    """Port: a typed script value that can serialise itself."""

    @abc.abstractmethod
    def identify(self) -> str:
        """Return the canonical text form of the value."""


__all__ = ["ObjectValue"]
