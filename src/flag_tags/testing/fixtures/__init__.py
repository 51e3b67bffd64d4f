"""Testing fixtures – pytest fixtures; load with ``pytest_plugins``."""
from flag_tags.testing.fixtures.clock import fake_clock
from flag_tags.testing.fixtures.tags import tag_context, warning_registry

__all__ = ["fake_clock", "tag_context", "warning_registry"]
