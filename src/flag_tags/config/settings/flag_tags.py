"""Config settings – FlagTagSettings.

Environment variables (all optional)::

    FLAG_TAGS_LIST_FLAGS_WARNING_COOLDOWN_SECONDS=10
    FLAG_TAGS_DEPRECATION_WARNING_COOLDOWN_SECONDS=10
    FLAG_TAGS_WARNINGS_ENABLED=true
    FLAG_TAGS_LOG_LEVEL=INFO
    FLAG_TAGS_JSON_LOGS=false
"""
from __future__ import annotations

import dataclasses
import logging
from typing import ClassVar

from flag_tags.config.settings.base import Settings
from flag_tags.config.settings.loaders import EnvSettingsLoader, SettingsLoader
from flag_tags.kernel.errors import InvalidSettingValueError

_LOG_LEVELS = frozenset(logging.getLevelNamesMapping())


@dataclasses.dataclass
class FlagTagSettings(Settings):
    """Warning throttling and logging knobs for tag evaluation."""

    _prefix: ClassVar[str] = "FLAG_TAGS"

    list_flags_warning_cooldown_seconds: float = 10.0
    deprecation_warning_cooldown_seconds: float = 10.0
    warnings_enabled: bool = True
    log_level: str = "INFO"
    json_logs: bool = False

    def _validate(self) -> None:
        for name in ("list_flags_warning_cooldown_seconds", "deprecation_warning_cooldown_seconds"):
            value = getattr(self, name)
            if value < 0:
                raise InvalidSettingValueError(name, value, "cooldown must be >= 0")
        self.log_level = self.log_level.upper()
        if self.log_level not in _LOG_LEVELS:
            raise InvalidSettingValueError("log_level", self.log_level, "unknown logging level")


def load_settings(loader: SettingsLoader | None = None) -> FlagTagSettings:
    """Load :class:`FlagTagSettings`, from the environment by default."""
    return (loader or EnvSettingsLoader()).load(FlagTagSettings)


__all__ = ["FlagTagSettings", "load_settings"]
