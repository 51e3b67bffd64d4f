"""Application tags – AttributeChain and its parser.

Grammar::

    chain   = segment *("." segment)
    segment = name *("[" context "]")
    name    = 1*(ALPHA / "_")

Brackets may nest and may contain dots; the parser only balances them and
hands the raw text between the outermost pair to whichever handler consumes
the segment.
"""
from __future__ import annotations

import dataclasses
import re
from collections.abc import Iterator
from typing import Final

from flag_tags.kernel.errors import AttributeParseError

_NAME: Final = re.compile(r"[A-Za-z_]+")


@dataclasses.dataclass(frozen=True, slots=True)
class AttributeSegment:
    """One ``name[context]`` element of a chain."""

    name: str
    context: tuple[str, ...] = ()
    raw_index: int = 0

    @property
    def has_context(self) -> bool:
        return bool(self.context)


@dataclasses.dataclass(frozen=True, slots=True)
class AttributeChain:
    """Immutable, ordered sequence of segments parsed from one tag."""

    segments: tuple[AttributeSegment, ...]
    raw: str = ""

    def __len__(self) -> int:
        return len(self.segments)

    def __iter__(self) -> Iterator[AttributeSegment]:
        return iter(self.segments)

    def __getitem__(self, index: int) -> AttributeSegment:
        return self.segments[index]

    def names(self) -> list[str]:
        return [segment.name for segment in self.segments]


def parse_attribute_chain(raw: str) -> AttributeChain:
    """Parse *raw* into an :class:`AttributeChain`.

    Raises :class:`~flag_tags.kernel.errors.AttributeParseError` on empty
    names, bad name characters, unbalanced brackets or stray characters
    after a closing bracket.
    """
    size = len(raw)
    segments: list[AttributeSegment] = []
    pos = 0
    while True:
        start = pos
        while pos < size and raw[pos] not in ".[]":
            pos += 1
        name = raw[start:pos]
        if not name:
            raise AttributeParseError(f"Empty attribute name at position {start}", raw=raw, position=start)
        if not _NAME.fullmatch(name):
            raise AttributeParseError(
                f"Invalid attribute name {name!r} at position {start}", raw=raw, position=start
            )

        contexts: list[str] = []
        while pos < size and raw[pos] == "[":
            depth = 1
            end = pos + 1
            while end < size and depth:
                if raw[end] == "[":
                    depth += 1
                elif raw[end] == "]":
                    depth -= 1
                end += 1
            if depth:
                raise AttributeParseError(f"Unclosed '[' at position {pos}", raw=raw, position=pos)
            body = raw[pos + 1 : end - 1]
            if body:
                contexts.append(body)
            pos = end

        segments.append(AttributeSegment(name.lower(), tuple(contexts), start))

        if pos == size:
            break
        if raw[pos] != ".":
            raise AttributeParseError(f"Unexpected {raw[pos]!r} at position {pos}", raw=raw, position=pos)
        pos += 1

    return AttributeChain(tuple(segments), raw)


__all__ = ["AttributeChain", "AttributeSegment", "parse_attribute_chain"]
