"""Configuration – env-based settings for the flag tag runtime."""
from flag_tags.config.settings import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    FlagTagSettings,
    Settings,
    SettingsLoader,
    load_settings,
)
from flag_tags.kernel.errors import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "FlagTagSettings",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
    "load_settings",
]
