"""ElementValue – scalar wrapper (text, numbers, booleans)."""

from __future__ import annotations

import dataclasses
from typing import Any

from flag_tags.kernel.types.base import ObjectValue

_TRUE_WORDS = frozenset({"true", "yes", "on", "1"})


@dataclasses.dataclass(frozen=True, slots=True)
class ElementValue(ObjectValue):
    """Immutable scalar value."""

    value: Any

    def identify(self) -> str:
        if isinstance(self.value, bool):
            return "true" if self.value else "false"
        return str(self.value)

    def as_boolean(self) -> bool:
        if isinstance(self.value, bool):
            return self.value
        return str(self.value).strip().lower() in _TRUE_WORDS

    def __str__(self) -> str:
        return self.identify()


__all__ = ["ElementValue"]
