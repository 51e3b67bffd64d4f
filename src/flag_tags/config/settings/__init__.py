"""Config settings – 12-factor env-based configuration."""
from flag_tags.config.settings.base import Settings
from flag_tags.config.settings.flag_tags import FlagTagSettings, load_settings
from flag_tags.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = [
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "FlagTagSettings",
    "Settings",
    "SettingsLoader",
    "load_settings",
]
