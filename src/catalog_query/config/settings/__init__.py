"""Config settings – 12-factor env-based configuration."""
from catalog_query.config.settings.base import ListingSettings, Settings
from catalog_query.config.settings.loaders import EnvSettingsLoader, SettingsLoader

__all__ = ["EnvSettingsLoader", "ListingSettings", "Settings", "SettingsLoader"]
