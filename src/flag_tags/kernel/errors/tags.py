"""Tag errors — failures while reading an attribute chain.

These never escape :func:`~flag_tags.application.tags.resolve_tag`; the
resolver turns them into a diagnostic on the tag context and a ``None``
result.
"""

from __future__ import annotations

from typing import Any

from flag_tags.kernel.errors.domain import DomainError


class TagError(DomainError):
    """Root for tag-resolution failures."""

    default_code = "tag_error"


class AttributeParseError(TagError):
    """The raw tag text is not a well-formed attribute chain."""

    default_code = "attribute_parse_error"

    def __init__(
        self,
        message: str,
        *,
        raw: str,
        position: int,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, raw=raw, position=position, **kwargs)
        self.raw = raw
        self.position = position


__all__ = ["AttributeParseError", "TagError"]
