"""Config – the settings currently in force for this process."""
from __future__ import annotations

from tryable.config.settings import EnvSettingsLoader, TrySettings
from tryable.kernel.errors import set_fatal_policy

_settings: TrySettings = TrySettings()


def get_settings() -> TrySettings:
    """Return the active settings (defaults until :func:`configure` runs)."""
    return _settings


def configure(settings: TrySettings | None = None) -> TrySettings:
    """Install *settings* and apply their fatal policy to the classifier.

    When *settings* is omitted they are loaded from ``TRY_*`` environment
    variables.
    """
    global _settings
    if settings is None:
        settings = EnvSettingsLoader().load(TrySettings)
    set_fatal_policy(settings.policy)
    _settings = settings
    return settings


__all__ = ["configure", "get_settings"]
