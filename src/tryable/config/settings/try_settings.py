"""Config settings – TrySettings."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from tryable.config.settings.base import Settings
from tryable.config.validation import InvalidSettingValueError
from tryable.kernel.errors import FatalPolicy


@dataclasses.dataclass(frozen=True)
class TrySettings(Settings):
    """Process-wide behaviour of ``Try``.

    Environment variables::

        TRY_FATAL_POLICY         category | denylist   (default: category)
        TRY_LOG_CLASSIFICATION   emit structlog events from the classifier
    """

    _prefix: ClassVar[str] = "TRY"

    fatal_policy: FatalPolicy | str = FatalPolicy.CATEGORY.value
    log_classification: bool = False

    def _validate(self) -> None:
        # accepts a FatalPolicy member as well as its string value
        raw = getattr(self.fatal_policy, "value", self.fatal_policy)
        normalised = str(raw).strip().lower()
        allowed = [p.value for p in FatalPolicy]
        if normalised not in allowed:
            raise InvalidSettingValueError(
                "fatal_policy",
                self.fatal_policy,
                f"must be one of {allowed}",
                env_key=f"{self._prefix}_FATAL_POLICY",
            )
        object.__setattr__(self, "fatal_policy", normalised)

    @property
    def policy(self) -> FatalPolicy:
        return FatalPolicy(self.fatal_policy)


__all__ = ["TrySettings"]
