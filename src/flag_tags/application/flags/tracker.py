"""Application flags – AbstractFlagTracker port."""
from __future__ import annotations

import abc
from collections.abc import Sequence
from typing import Any

from flag_tags.kernel.types import TimestampValue


class AbstractFlagTracker(abc.ABC):
    """Port: the flag store every flaggable object type supplies.

    A missing key is never an error: lookups return ``None`` (or ``False``)
    and removals of unknown keys are no-ops.
    """

    @abc.abstractmethod
    def get_flag_value(self, key: str) -> Any | None:
        """Return the value for *key*, or ``None`` if unset or expired."""

    @abc.abstractmethod
    def get_flag_expiration_time(self, key: str) -> TimestampValue | None:
        """Return the stored expiration of *key*, even if it has already passed.

        ``None`` when there is no record at all or it never expires.
        """

    @abc.abstractmethod
    def list_all_flags(self) -> Sequence[str]:
        """Return the keys of all unexpired flags, in store order."""

    @abc.abstractmethod
    def now(self) -> TimestampValue:
        """The instant this tracker measures expiry against."""

    @abc.abstractmethod
    def set_flag(self, key: str, value: Any | None, expiration: TimestampValue | None = None) -> None:
        """Create or overwrite *key*; a ``None`` value removes it."""

    def has_flag(self, key: str) -> bool:
        return self.get_flag_value(key) is not None


__all__ = ["AbstractFlagTracker"]
