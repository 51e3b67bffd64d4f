"""ListValue – ordered list of values."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

from flag_tags.kernel.types.base import ObjectValue


class ListValue(ObjectValue):
    """Ordered, append-only list; keeps whatever order items arrive in."""

    __slots__ = ("_items",)

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._items: list[Any] = list(items)

    def add_all(self, items: Iterable[Any]) -> None:
        self._items.extend(items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __getitem__(self, index: int) -> Any:
        return self._items[index]

    def __contains__(self, item: object) -> bool:
        return item in self._items

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ListValue):
            return self._items == other._items
        if isinstance(other, list):
            return self._items == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"ListValue({self._items!r})"

    def identify(self) -> str:
        parts = [item.identify() if isinstance(item, ObjectValue) else str(item) for item in self._items]
        return "li@" + "".join(f"{p}|" for p in parts)


__all__ = ["ListValue"]
