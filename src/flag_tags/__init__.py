"""
flag_tags – expiring object flags and the tag attributes that read them.

Import path convention::

    from flag_tags.application.flags import InMemoryFlagTracker, register_flag_handlers
    from flag_tags.application.tags import TagContext, parse_attribute_chain
    from flag_tags.application.warnings import WarningRegistry
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
