"""Testing helpers – fakes and pytest fixtures for flag tag tests."""
from flag_tags.testing.fakes import FAKE_NOW, FakeClock, FrozenClock, make_tag_context

__all__ = ["FAKE_NOW", "FakeClock", "FrozenClock", "make_tag_context"]
