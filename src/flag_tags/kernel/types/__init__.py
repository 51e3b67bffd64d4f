"""Kernel value types — the objects tags hand back to scripts.

Modules:
  base.py      — ObjectValue
  element.py   — ElementValue
  duration.py  — DurationValue
  timestamp.py — TimestampValue
  listing.py   — ListValue
"""

from flag_tags.kernel.types.base import ObjectValue
from flag_tags.kernel.types.duration import DurationValue
from flag_tags.kernel.types.element import ElementValue
from flag_tags.kernel.types.listing import ListValue
from flag_tags.kernel.types.timestamp import TimestampValue

__all__ = [
    "DurationValue",
    "ElementValue",
    "ListValue",
    "ObjectValue",
    "TimestampValue",
]
