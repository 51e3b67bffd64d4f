"""Unit tests for the flag tags: flag, has_flag, flag_expiration, list_flags."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any, ClassVar

import pytest

from flag_tags.application.diagnostics import DiagnosticKind
from flag_tags.application.flags import (
    AbstractFlagTracker,
    Flaggable,
    FlaggableObject,
    FlagTagResolver,
    InMemoryFlagTracker,
    register_flag_handlers,
)
from flag_tags.application.tags import Attribute, TagContext, TagDispatchTable, parse_attribute_chain, resolve_tag
from flag_tags.application.warnings import (
    FLAG_EXPIRATION_TAG,
    FLAG_IS_EXPIRED_TAG,
    LIST_FLAGS_TAG,
    WarningRegistry,
)
from flag_tags.kernel.time import FrozenClock
from flag_tags.kernel.types import DurationValue, ElementValue, ListValue, TimestampValue


class SpyTracker(InMemoryFlagTracker):
    """Counts every store access."""

    def __init__(self, clock: FrozenClock) -> None:
        super().__init__(clock)
        self.calls: list[str] = []

    def get_flag_value(self, key: str) -> Any | None:
        self.calls.append("get_flag_value")
        return super().get_flag_value(key)

    def get_flag_expiration_time(self, key: str) -> TimestampValue | None:
        self.calls.append("get_flag_expiration_time")
        return super().get_flag_expiration_time(key)

    def list_all_flags(self) -> list[str]:
        self.calls.append("list_all_flags")
        return super().list_all_flags()


@pytest.fixture
def obj(fake_clock: FrozenClock) -> FlaggableObject:
    return FlaggableObject("O", clock=fake_clock)


def _tracker(obj: FlaggableObject) -> AbstractFlagTracker:
    return obj.get_flag_tracker()


# ---------------------------------------------------------------------------
# flag[...]
# ---------------------------------------------------------------------------


class TestFlagTag:
    def test_returns_value(self, obj: FlaggableObject, tag_context: TagContext) -> None:
        _tracker(obj).set_flag("score", ElementValue(42))
        assert resolve_tag(obj, "flag[score]", tag_context) == ElementValue(42)
        assert tag_context.diagnostics == []

    def test_absent_flag_is_silent_null(self, obj: FlaggableObject, tag_context: TagContext) -> None:
        assert resolve_tag(obj, "flag[missing]", tag_context) is None
        assert tag_context.diagnostics == []

    @pytest.mark.parametrize("raw", ["flag", "flag[]"])
    def test_missing_context_reports_once_and_skips_store(
        self, raw: str, fake_clock: FrozenClock, tag_context: TagContext
    ) -> None:
        spy = SpyTracker(fake_clock)
        assert resolve_tag(FlaggableObject("spy", spy), raw, tag_context) is None
        [diagnostic] = tag_context.diagnostics
        assert diagnostic.kind is DiagnosticKind.MISSING_CONTEXT
        assert diagnostic.message == "The flag[...] tag must have an input!"
        assert spy.calls == []

    def test_context_is_resolved_before_lookup(self, obj: FlaggableObject, fake_clock, warning_registry) -> None:
        _tracker(obj).set_flag("score", ElementValue(42))
        context = TagContext(
            warning_registry, fake_clock, context_resolver=lambda raw: "score" if raw == "<key>" else raw
        )
        assert resolve_tag(obj, "flag[<key>]", context) == ElementValue(42)

    def test_tag_names_are_case_insensitive(self, obj: FlaggableObject, tag_context: TagContext) -> None:
        _tracker(obj).set_flag("score", ElementValue(1))
        assert resolve_tag(obj, "FLAG[score]", tag_context) == ElementValue(1)
        assert resolve_tag(obj, "flag[SCORE]", tag_context) is None

    def test_further_segments_on_plain_value_fail(self, obj: FlaggableObject, tag_context: TagContext) -> None:
        _tracker(obj).set_flag("score", ElementValue(42))
        assert resolve_tag(obj, "flag[score].colour", tag_context) is None
        [diagnostic] = tag_context.errors
        assert diagnostic.kind is DiagnosticKind.UNKNOWN_ATTRIBUTE

    def test_flag_holding_flaggable_continues_chain(
        self, obj: FlaggableObject, fake_clock: FrozenClock, tag_context: TagContext
    ) -> None:
        inner = FlaggableObject("inner", clock=fake_clock)
        inner.get_flag_tracker().set_flag("depth", ElementValue(2))
        _tracker(obj).set_flag("child", inner)
        assert resolve_tag(obj, "flag[child].flag[depth]", tag_context) == ElementValue(2)


# ---------------------------------------------------------------------------
# Legacy flag[...].is_expired / flag[...].expiration
# ---------------------------------------------------------------------------


class TestLegacyIsExpired:
    def test_negates_has_flag(self, obj: FlaggableObject, fake_clock: FrozenClock, tag_context: TagContext) -> None:
        assert resolve_tag(obj, "flag[k].is_expired", tag_context) == ElementValue(True)
        _tracker(obj).set_flag("k", ElementValue(1), TimestampValue.now(fake_clock).after(seconds=5))
        assert resolve_tag(obj, "flag[k].is_expired", tag_context) == ElementValue(False)
        fake_clock.advance(seconds=5)
        assert resolve_tag(obj, "flag[k].is_expired", tag_context) == ElementValue(True)

    def test_fires_deprecation_warning_throttled(self, obj: FlaggableObject, tag_context: TagContext) -> None:
        for _ in range(5):
            assert resolve_tag(obj, "flag[k].is_expired", tag_context) == ElementValue(True)
        [diagnostic] = tag_context.diagnostics
        assert diagnostic.kind is DiagnosticKind.DEPRECATED_USAGE
        assert diagnostic.warning_id == FLAG_IS_EXPIRED_TAG
        assert "has_flag[...]" in diagnostic.message

    def test_still_works_with_warnings_suppressed(self, obj: FlaggableObject, tag_context: TagContext) -> None:
        tag_context.warnings.suppress(FLAG_IS_EXPIRED_TAG)
        assert resolve_tag(obj, "flag[k].is_expired", tag_context) == ElementValue(True)
        assert tag_context.diagnostics == []

    def test_missing_context_wins(self, obj: FlaggableObject, tag_context: TagContext) -> None:
        assert resolve_tag(obj, "flag.is_expired", tag_context) is None
        assert [d.kind for d in tag_context.diagnostics] == [DiagnosticKind.MISSING_CONTEXT]


class TestLegacyExpiration:
    def test_no_expiration_is_null(self, obj: FlaggableObject, tag_context: TagContext) -> None:
        _tracker(obj).set_flag("k", ElementValue(1))
        assert resolve_tag(obj, "flag[k].expiration", tag_context) is None
        assert resolve_tag(obj, "flag[unset].expiration", tag_context) is None

    def test_future_expiration_is_negative_elapsed_time(
        self, obj: FlaggableObject, fake_clock: FrozenClock, tag_context: TagContext
    ) -> None:
        _tracker(obj).set_flag("k", ElementValue(1), TimestampValue.now(fake_clock).after(seconds=10))
        result = resolve_tag(obj, "flag[k].expiration", tag_context)
        assert result == DurationValue(-10.0)

    def test_past_expiration_is_positive_elapsed_time(
        self, obj: FlaggableObject, fake_clock: FrozenClock, tag_context: TagContext
    ) -> None:
        _tracker(obj).set_flag("k", ElementValue(1), TimestampValue.now(fake_clock).after(milliseconds=500))
        fake_clock.advance(seconds=3)
        result = resolve_tag(obj, "flag[k].expiration", tag_context)
        assert isinstance(result, DurationValue)
        assert result.seconds == 2.5

    def test_matches_millisecond_arithmetic(
        self, obj: FlaggableObject, fake_clock: FrozenClock, tag_context: TagContext
    ) -> None:
        expires = TimestampValue.now(fake_clock).after(milliseconds=1234)
        _tracker(obj).set_flag("k", ElementValue(1), expires)
        result = resolve_tag(obj, "flag[k].expiration", tag_context)
        now = TimestampValue.now(fake_clock)
        assert result.seconds == (now.millis - expires.millis) / 1000.0

    def test_elapsed_time_uses_the_tracker_clock(self, tag_context: TagContext) -> None:
        tracker_clock = FrozenClock(datetime(2025, 6, 1, tzinfo=UTC))
        obj = FlaggableObject("O", clock=tracker_clock)
        _tracker(obj).set_flag("k", ElementValue(1), TimestampValue.now(tracker_clock).after(seconds=10))
        assert tag_context.now() != tracker_clock.now()
        assert resolve_tag(obj, "has_flag[k]", tag_context) == ElementValue(True)
        assert resolve_tag(obj, "flag[k].is_expired", tag_context) == ElementValue(False)
        assert resolve_tag(obj, "flag[k].expiration", tag_context) == DurationValue(-10.0)

    def test_fires_its_own_deprecation(self, obj: FlaggableObject, tag_context: TagContext) -> None:
        resolve_tag(obj, "flag[k].expiration", tag_context)
        resolve_tag(obj, "flag[k].is_expired", tag_context)
        assert [d.warning_id for d in tag_context.diagnostics] == [FLAG_EXPIRATION_TAG, FLAG_IS_EXPIRED_TAG]


# ---------------------------------------------------------------------------
# has_flag[...] / flag_expiration[...]
# ---------------------------------------------------------------------------


class TestHasFlagTag:
    def test_boolean_result(self, obj: FlaggableObject, tag_context: TagContext) -> None:
        assert resolve_tag(obj, "has_flag[k]", tag_context) == ElementValue(False)
        _tracker(obj).set_flag("k", ElementValue("x"))
        assert resolve_tag(obj, "has_flag[k]", tag_context) == ElementValue(True)

    def test_missing_context(self, obj: FlaggableObject, tag_context: TagContext) -> None:
        assert resolve_tag(obj, "has_flag", tag_context) is None
        [diagnostic] = tag_context.diagnostics
        assert diagnostic.kind is DiagnosticKind.MISSING_CONTEXT
        assert diagnostic.message == "The has_flag[...] tag must have an input!"


class TestFlagExpirationTag:
    def test_returns_stored_instant(
        self, obj: FlaggableObject, fake_clock: FrozenClock, tag_context: TagContext
    ) -> None:
        expires = TimestampValue.now(fake_clock).after(minutes=5)
        _tracker(obj).set_flag("k", ElementValue(1), expires)
        assert resolve_tag(obj, "flag_expiration[k]", tag_context) == expires

    def test_absent_is_silent_null(self, obj: FlaggableObject, tag_context: TagContext) -> None:
        _tracker(obj).set_flag("forever", ElementValue(1))
        assert resolve_tag(obj, "flag_expiration[forever]", tag_context) is None
        assert resolve_tag(obj, "flag_expiration[unset]", tag_context) is None
        assert tag_context.diagnostics == []

    def test_missing_context(self, obj: FlaggableObject, tag_context: TagContext) -> None:
        assert resolve_tag(obj, "flag_expiration", tag_context) is None
        [diagnostic] = tag_context.diagnostics
        assert diagnostic.message == "The flag_expiration[...] tag must have an input!"


# ---------------------------------------------------------------------------
# list_flags
# ---------------------------------------------------------------------------


class TestListFlagsTag:
    def test_store_order_without_sorting(self, obj: FlaggableObject, tag_context: TagContext) -> None:
        for key in ("zeta", "alpha", "mid"):
            _tracker(obj).set_flag(key, ElementValue(key))
        result = resolve_tag(obj, "list_flags", tag_context)
        assert isinstance(result, ListValue)
        assert result == ["zeta", "alpha", "mid"]

    def test_warning_at_most_once_per_window(
        self, obj: FlaggableObject, fake_clock: FrozenClock, tag_context: TagContext
    ) -> None:
        _tracker(obj).set_flag("a", ElementValue(1))
        for _ in range(25):
            assert resolve_tag(obj, "list_flags", tag_context) == ["a"]
        debug = tag_context.of_kind(DiagnosticKind.DEBUG_ONLY_USAGE)
        assert len(debug) == 1
        assert debug[0].warning_id == LIST_FLAGS_TAG
        fake_clock.advance(seconds=10)
        resolve_tag(obj, "list_flags", tag_context)
        assert len(tag_context.of_kind(DiagnosticKind.DEBUG_ONLY_USAGE)) == 2


# ---------------------------------------------------------------------------
# Bare registry
# ---------------------------------------------------------------------------


class TestBareWarningRegistry:
    @pytest.fixture
    def bare_context(self, fake_clock: FrozenClock) -> TagContext:
        return TagContext(WarningRegistry(fake_clock), fake_clock)

    def test_list_flags_resolves_without_builtin_warnings(
        self, obj: FlaggableObject, bare_context: TagContext
    ) -> None:
        _tracker(obj).set_flag("a", ElementValue(1))
        assert resolve_tag(obj, "list_flags", bare_context) == ["a"]
        assert bare_context.diagnostics == []

    def test_legacy_forms_resolve_without_builtin_warnings(
        self, obj: FlaggableObject, fake_clock: FrozenClock, bare_context: TagContext
    ) -> None:
        _tracker(obj).set_flag("k", ElementValue(1), TimestampValue.now(fake_clock).after(seconds=10))
        assert resolve_tag(obj, "flag[k].is_expired", bare_context) == ElementValue(False)
        assert resolve_tag(obj, "flag[k].expiration", bare_context) == DurationValue(-10.0)
        assert bare_context.diagnostics == []


# ---------------------------------------------------------------------------
# End to end
# ---------------------------------------------------------------------------


class TestEndToEnd:
    def test_permanent_flag(self, obj: FlaggableObject, tag_context: TagContext) -> None:
        _tracker(obj).set_flag("score", ElementValue(42))
        assert resolve_tag(obj, "flag[score]", tag_context) == ElementValue(42)
        assert resolve_tag(obj, "has_flag[score]", tag_context) == ElementValue(True)
        assert "score" in resolve_tag(obj, "list_flags", tag_context)

    def test_short_lived_flag_vanishes(
        self, obj: FlaggableObject, fake_clock: FrozenClock, tag_context: TagContext
    ) -> None:
        _tracker(obj).set_flag("temp", ElementValue("x"), TimestampValue.now(fake_clock).after(milliseconds=1))
        assert resolve_tag(obj, "has_flag[temp]", tag_context) == ElementValue(True)
        fake_clock.advance(milliseconds=1)
        assert resolve_tag(obj, "flag[temp]", tag_context) is None
        assert resolve_tag(obj, "has_flag[temp]", tag_context) == ElementValue(False)
        assert "temp" not in resolve_tag(obj, "list_flags", tag_context)
        assert tag_context.errors == []


# ---------------------------------------------------------------------------
# Wiring into other flaggable types
# ---------------------------------------------------------------------------


class Player:
    """A flaggable type outside the library, composed with its own tracker."""

    tag_processor: ClassVar[TagDispatchTable] = TagDispatchTable("Player")

    def __init__(self, tracker: AbstractFlagTracker) -> None:
        self._tracker = tracker

    def get_flag_tracker(self) -> AbstractFlagTracker:
        return self._tracker


register_flag_handlers(Player.tag_processor)


class TestRegisterFlagHandlers:
    def test_registers_four_tags(self) -> None:
        assert sorted(Player.tag_processor.names()) == ["flag", "flag_expiration", "has_flag", "list_flags"]

    def test_second_registration_rejected(self) -> None:
        with pytest.raises(ValueError):
            register_flag_handlers(Player.tag_processor)

    def test_custom_type_resolves(self, fake_clock: FrozenClock, tag_context: TagContext) -> None:
        player = Player(InMemoryFlagTracker(fake_clock))
        player.get_flag_tracker().set_flag("kills", ElementValue(3))
        assert isinstance(player, Flaggable)
        assert resolve_tag(player, "flag[kills]", tag_context) == ElementValue(3)

    def test_resolver_usable_directly(self, obj: FlaggableObject, tag_context: TagContext) -> None:
        _tracker(obj).set_flag("k", ElementValue(1))
        attribute = Attribute(parse_attribute_chain("has_flag[k]"), tag_context)
        assert FlagTagResolver().do_has_flag_tag(attribute, _tracker(obj)) == ElementValue(True)

    def test_flaggable_object_identity(self, obj: FlaggableObject) -> None:
        assert obj.identify() == "flaggable@O"
        assert isinstance(obj.get_flag_tracker(), InMemoryFlagTracker)
