"""Application warnings – suppressible, rate-limited diagnostics."""
from flag_tags.application.warnings.registry import (
    FLAG_EXPIRATION_TAG,
    FLAG_IS_EXPIRED_TAG,
    LIST_FLAGS_TAG,
    WarningRegistry,
    build_default_registry,
)
from flag_tags.application.warnings.warning import (
    DeprecatedTagWarning,
    OneShotWarning,
    SlowWarning,
    TagWarning,
    WarningKind,
    WarningSink,
)

__all__ = [
    "DeprecatedTagWarning",
    "FLAG_EXPIRATION_TAG",
    "FLAG_IS_EXPIRED_TAG",
    "LIST_FLAGS_TAG",
    "OneShotWarning",
    "SlowWarning",
    "TagWarning",
    "WarningKind",
    "WarningRegistry",
    "WarningSink",
    "build_default_registry",
]
