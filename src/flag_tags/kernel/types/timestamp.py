"""TimestampValue – an absolute, timezone-aware instant."""

from __future__ import annotations

import dataclasses
from datetime import UTC, datetime, timedelta

from flag_tags.kernel.errors.domain import ValidationError
from flag_tags.kernel.time import Clock
from flag_tags.kernel.types.base import ObjectValue
from flag_tags.kernel.types.duration import DurationValue

_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)
_ONE_MILLI = timedelta(milliseconds=1)


@dataclasses.dataclass(frozen=True, slots=True, order=True)
class TimestampValue(ObjectValue):
    """Immutable instant.

    Subtracting two timestamps yields a :class:`DurationValue` computed from
    whole epoch milliseconds, so ``(a - b).seconds`` equals
    ``(a.millis - b.millis) / 1000.0`` exactly.
    """

    instant: datetime

    def __post_init__(self) -> None:
        if self.instant.tzinfo is None:
            raise ValidationError("TimestampValue requires a timezone-aware datetime")

    @classmethod
    def now(cls, clock: Clock) -> "TimestampValue":
        return cls(clock.now())

    @classmethod
    def from_millis(cls, millis: int) -> "TimestampValue":
        return cls(_EPOCH + timedelta(milliseconds=millis))

    @property
    def millis(self) -> int:
        return (self.instant - _EPOCH) // _ONE_MILLI

    def after(self, **kwargs: int | float) -> "TimestampValue":
        """Return the instant shifted by the given ``timedelta`` kwargs."""
        return TimestampValue(self.instant + timedelta(**kwargs))

    def is_past(self, now: datetime) -> bool:
        return self.instant <= now

    def __sub__(self, other: "TimestampValue") -> DurationValue:
        if not isinstance(other, TimestampValue):
            return NotImplemented
        return DurationValue.from_millis(self.millis - other.millis)

    def identify(self) -> str:
        return f"time@{self.instant.isoformat()}"

    def __str__(self) -> str:
        return self.identify()


__all__ = ["TimestampValue"]
