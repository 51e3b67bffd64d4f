"""Application flags – FlagRecord value object."""
from __future__ import annotations

import dataclasses
from datetime import datetime
from typing import Any

from flag_tags.kernel.types import TimestampValue


@dataclasses.dataclass(frozen=True, slots=True)
class FlagRecord:
    """A flag's value plus its optional expiration instant."""

    value: Any
    expires_at: TimestampValue | None = None

    def is_expired(self, now: datetime) -> bool:
        """``True`` from the expiration instant onward; never for ``expires_at=None``."""
        return self.expires_at is not None and self.expires_at.is_past(now)


__all__ = ["FlagRecord"]
