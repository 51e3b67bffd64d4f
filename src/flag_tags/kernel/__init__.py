"""Kernel – framework-agnostic building blocks (errors, clocks, values)."""

from flag_tags.kernel.errors import (
    ApplicationError,
    AttributeParseError,
    BaseError,
    DomainError,
    TagError,
    ValidationError,
)

__all__ = [
    "ApplicationError",
    "AttributeParseError",
    "BaseError",
    "DomainError",
    "TagError",
    "ValidationError",
]
