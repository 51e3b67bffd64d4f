"""DurationValue – a signed span of time in seconds."""

from __future__ import annotations

import dataclasses
import math
from datetime import timedelta

from flag_tags.kernel.errors.domain import ValidationError
from flag_tags.kernel.types.base import ObjectValue


@dataclasses.dataclass(frozen=True, slots=True, order=True)
class DurationValue(ObjectValue):
    """Immutable duration.

    Negative spans are allowed; the legacy ``flag[...].expiration`` tag
    reports one for flags that have not expired yet.
    """

    seconds: float

    def __post_init__(self) -> None:
        if math.isnan(self.seconds) or math.isinf(self.seconds):
            raise ValidationError(f"Duration must be finite, got {self.seconds!r}")

    @classmethod
    def from_millis(cls, millis: int) -> "DurationValue":
        return cls(millis / 1000.0)

    @property
    def millis(self) -> int:
        return round(self.seconds * 1000)

    def to_timedelta(self) -> timedelta:
        return timedelta(seconds=self.seconds)

    def identify(self) -> str:
        text = repr(float(self.seconds))
        if text.endswith(".0"):
            text = text[:-2]
        return f"d@{text}s"

    def __str__(self) -> str:
        return self.identify()


__all__ = ["DurationValue"]
