"""Domain errors — invalid values handed to the kernel types."""

from __future__ import annotations

from flag_tags.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a domain rule is violated."""

    default_code = "domain_error"


class ValidationError(DomainError):
    """Input data does not meet validation rules."""

    default_code = "validation_error"


__all__ = ["DomainError", "ValidationError"]
