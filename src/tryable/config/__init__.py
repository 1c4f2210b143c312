"""Config – 12-factor settings and the process-wide Try configuration."""

from tryable.config.runtime import configure, get_settings
from tryable.config.settings import EnvSettingsLoader, Settings, SettingsLoader, TrySettings
from tryable.config.validation import ConfigError, InvalidSettingValueError

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "Settings",
    "SettingsLoader",
    "TrySettings",
    "configure",
    "get_settings",
]
