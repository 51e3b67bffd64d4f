"""Testing fakes – deterministic doubles for kernel ports."""
from flag_tags.kernel.time import FrozenClock
from flag_tags.testing.fakes.context import FAKE_NOW, FakeClock, make_tag_context

__all__ = ["FAKE_NOW", "FakeClock", "FrozenClock", "make_tag_context"]
