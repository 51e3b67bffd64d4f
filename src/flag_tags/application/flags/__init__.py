"""Application flags – expiring per-object flags and their tags."""
from flag_tags.application.flags.flaggable import Flaggable, FlaggableObject
from flag_tags.application.flags.in_memory import InMemoryFlagTracker
from flag_tags.application.flags.record import FlagRecord
from flag_tags.application.flags.resolver import FlagTagResolver, register_flag_handlers
from flag_tags.application.flags.tracker import AbstractFlagTracker

__all__ = [
    "AbstractFlagTracker",
    "FlagRecord",
    "FlagTagResolver",
    "Flaggable",
    "FlaggableObject",
    "InMemoryFlagTracker",
    "register_flag_handlers",
]
