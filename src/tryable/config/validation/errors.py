"""Config validation errors."""
from __future__ import annotations

from typing import Any

from tryable.kernel.errors import TryError


class ConfigError(TryError):
    """Raised when configuration is invalid or loading failed."""
    default_code = "config_error"


class InvalidSettingValueError(ConfigError):
    """A setting's value is present but semantically invalid.

    ``setting_name`` is the dataclass field; ``env_key`` is the environment
    variable it is read from, when there is one.
    """
    default_code = "invalid_setting_value"

    def __init__(
        self,
        setting_name: str,
        value: object,
        reason: str,
        *,
        env_key: str | None = None,
    ) -> None:
        source = f" (from {env_key})" if env_key else ""
        super().__init__(
            f"Setting '{setting_name}'{source} has invalid value {value!r}: {reason}",
            detail={"setting": setting_name, "env_key": env_key},
        )
        self.setting_name = setting_name
        self.env_key = env_key
        self.value = value
        self.reason = reason

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["value"] = repr(self.value)
        return base


__all__ = ["ConfigError", "InvalidSettingValueError"]
