"""Config settings – 12-factor env-based configuration."""
from tryable.config.settings.base import Settings
from tryable.config.settings.loaders import EnvSettingsLoader, SettingsLoader
from tryable.config.settings.try_settings import TrySettings

__all__ = ["EnvSettingsLoader", "Settings", "SettingsLoader", "TrySettings"]
