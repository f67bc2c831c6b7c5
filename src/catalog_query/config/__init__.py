"""Config – 12-factor listing settings and loaders."""

from catalog_query.config.settings import EnvSettingsLoader, ListingSettings, Settings, SettingsLoader
from catalog_query.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "ListingSettings",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
