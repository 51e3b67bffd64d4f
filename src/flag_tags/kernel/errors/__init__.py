"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError                   (domain.py)
    │   ├── ValidationError
    │   └── TagError                  (tags.py)
    │       └── AttributeParseError
    └── ApplicationError              (application.py)
        └── ConfigError
            ├── MissingRequiredSettingError
            └── InvalidSettingValueError
"""

from flag_tags.kernel.errors.application import (
    ApplicationError,
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)
from flag_tags.kernel.errors.base import BaseError
from flag_tags.kernel.errors.domain import DomainError, ValidationError
from flag_tags.kernel.errors.tags import AttributeParseError, TagError

__all__ = [
    "ApplicationError",
    "AttributeParseError",
    "BaseError",
    "ConfigError",
    "DomainError",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "TagError",
    "ValidationError",
]
