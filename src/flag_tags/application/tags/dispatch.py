"""Application tags – TagDispatchTable and resolve_tag."""
from __future__ import annotations

import re
from collections.abc import Callable
from typing import Any, Final

from flag_tags.application.diagnostics import DiagnosticKind
from flag_tags.application.tags.attribute import Attribute
from flag_tags.application.tags.chain import parse_attribute_chain
from flag_tags.application.tags.context import TagContext
from flag_tags.kernel.errors import TagError

TagHandler = Callable[[Attribute, Any], Any]

_NAME: Final = re.compile(r"[a-z_]+")


class TagDispatchTable:
    """Maps a segment name to the handler that answers it for one object type.

    A flaggable type keeps one table as a class attribute named
    ``tag_processor``; :meth:`get_object_attribute` follows that attribute on
    each intermediate result to keep walking the chain.
    """

    def __init__(self, type_name: str = "object") -> None:
        self.type_name = type_name
        self._handlers: dict[str, TagHandler] = {}

    def register_tag(self, name: str, handler: TagHandler) -> None:
        key = name.lower()
        if not _NAME.fullmatch(key):
            raise ValueError(f"Invalid tag name {name!r}")
        if key in self._handlers:
            raise ValueError(f"Tag {key!r} is already registered on {self.type_name}")
        self._handlers[key] = handler

    def get(self, name: str) -> TagHandler | None:
        return self._handlers.get(name.lower())

    def names(self) -> list[str]:
        return list(self._handlers)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.lower() in self._handlers

    def __len__(self) -> int:
        return len(self._handlers)

    def get_object_attribute(self, obj: Any, attribute: Attribute) -> Any:
        """Walk *attribute* from its cursor against *obj*; ``None`` on failure."""
        current = obj
        table: TagDispatchTable | None = self
        while not attribute.is_complete:
            name = attribute.get_attribute_without_context(1)
            handler = table.get(name) if table is not None else None
            if handler is None:
                type_name = table.type_name if table is not None else type(current).__name__
                attribute.echo_error(
                    f"Unknown tag attribute '{name}' for {type_name}",
                    kind=DiagnosticKind.UNKNOWN_ATTRIBUTE,
                )
                return None
            result = handler(attribute, current)
            if result is None:
                return None
            attribute.fulfill(1)
            current = result
            table = getattr(result, "tag_processor", None)
        return current


def resolve_tag(obj: Any, raw: str, context: TagContext) -> Any:
    """Parse *raw* and resolve it against *obj*'s ``tag_processor``.

    Never raises for bad tags: failures are reported on *context* and the
    result is ``None``.
    """
    try:
        chain = parse_attribute_chain(raw)
    except TagError as exc:
        context.report(DiagnosticKind.PARSE_ERROR, exc.message, position=exc.detail.get("position"))
        return None
    table: TagDispatchTable | None = getattr(obj, "tag_processor", None)
    if table is None:
        context.report(
            DiagnosticKind.UNKNOWN_ATTRIBUTE,
            f"{type(obj).__name__} has no tag attributes",
            segment=chain[0].name,
        )
        return None
    return table.get_object_attribute(obj, Attribute(chain, context))


__all__ = ["TagDispatchTable", "TagHandler", "resolve_tag"]
