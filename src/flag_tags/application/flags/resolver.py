"""Application flags – FlagTagResolver and register_flag_handlers.

Tags answered for every flaggable type:

``flag[<name>]``
    The flag's value, or null when unset/expired.
``has_flag[<name>]``
    ``true`` if the flag is set and unexpired.
``flag_expiration[<name>]``
    The stored expiration instant, or null.
``list_flags``
    All live flag names. Debug/testing only; fires a rate-limited warning.

Two deprecated forms of ``flag`` are still honoured:
``flag[<name>].is_expired`` (negation of ``has_flag``) and
``flag[<name>].expiration``, which returns the time elapsed *since* the
expiration instant (negative while the flag is still live).
"""
from __future__ import annotations

from typing import Any

from flag_tags.application.diagnostics import DiagnosticKind
from flag_tags.application.flags.tracker import AbstractFlagTracker
from flag_tags.application.tags import Attribute, TagDispatchTable
from flag_tags.application.warnings import FLAG_EXPIRATION_TAG, FLAG_IS_EXPIRED_TAG, LIST_FLAGS_TAG
from flag_tags.kernel.types import ElementValue, ListValue, TimestampValue


class FlagTagResolver:
    """The four flag tag handlers; holds no state of its own."""

    def _require_key(self, attribute: Attribute, tag: str) -> str | None:
        if not attribute.has_context(1):
            attribute.echo_error(f"The {tag}[...] tag must have an input!", kind=DiagnosticKind.MISSING_CONTEXT)
            return None
        return attribute.get_context(1)

    def do_flag_tag(self, attribute: Attribute, tracker: AbstractFlagTracker) -> Any | None:
        key = self._require_key(attribute, "flag")
        if key is None:
            return None
        match attribute.get_attribute_without_context(2):
            case "is_expired":
                attribute.context.warnings.warn(FLAG_IS_EXPIRED_TAG, attribute.context)
                attribute.fulfill(1)
                return ElementValue(not tracker.has_flag(key))
            case "expiration":
                attribute.context.warnings.warn(FLAG_EXPIRATION_TAG, attribute.context)
                attribute.fulfill(1)
                time = tracker.get_flag_expiration_time(key)
                if time is None:
                    return None
                return tracker.now() - time
            case _:
                return tracker.get_flag_value(key)

    def do_has_flag_tag(self, attribute: Attribute, tracker: AbstractFlagTracker) -> ElementValue | None:
        key = self._require_key(attribute, "has_flag")
        if key is None:
            return None
        return ElementValue(tracker.has_flag(key))

    def do_flag_expiration_tag(self, attribute: Attribute, tracker: AbstractFlagTracker) -> TimestampValue | None:
        key = self._require_key(attribute, "flag_expiration")
        if key is None:
            return None
        return tracker.get_flag_expiration_time(key)

    def do_list_flags_tag(self, attribute: Attribute, tracker: AbstractFlagTracker) -> ListValue:
        attribute.context.warnings.warn(LIST_FLAGS_TAG, attribute.context)
        flags = ListValue()
        flags.add_all(tracker.list_all_flags())
        return flags


def register_flag_handlers(table: TagDispatchTable, resolver: FlagTagResolver | None = None) -> None:
    """Wire ``flag``, ``has_flag``, ``flag_expiration`` and ``list_flags`` into *table*.

    Objects dispatched through *table* must provide ``get_flag_tracker()``.
    """
    resolver = resolver or FlagTagResolver()
    table.register_tag("flag", lambda attribute, obj: resolver.do_flag_tag(attribute, obj.get_flag_tracker()))
    table.register_tag("has_flag", lambda attribute, obj: resolver.do_has_flag_tag(attribute, obj.get_flag_tracker()))
    table.register_tag(
        "flag_expiration",
        lambda attribute, obj: resolver.do_flag_expiration_tag(attribute, obj.get_flag_tracker()),
    )
    table.register_tag(
        "list_flags",
        lambda attribute, obj: resolver.do_list_flags_tag(attribute, obj.get_flag_tracker()),
    )


__all__ = ["FlagTagResolver", "register_flag_handlers"]
