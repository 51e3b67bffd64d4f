"""Config settings – Settings base class."""
from __future__ import annotations

import dataclasses
from typing import ClassVar


@dataclasses.dataclass
class Settings:
    """Base class for env-driven settings.

    Subclasses set ``_prefix``; each field is read from ``<PREFIX>_<FIELD>``.
    """

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    @classmethod
    def env_key(cls, field_name: str) -> str:
        return f"{cls._prefix}_{field_name}".upper().lstrip("_")

    @classmethod
    def is_required(cls, field: dataclasses.Field) -> bool:  # type: ignore[type-arg]
        return field.default is dataclasses.MISSING and field.default_factory is dataclasses.MISSING

    def _validate(self) -> None:
        """Override to add cross-field validation."""


__all__ = ["Settings"]
