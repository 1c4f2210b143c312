"""Errors synthesised by ``Try`` combinators themselves.

Both are ordinary recoverable exceptions: they only ever travel inside a
``Failure`` and are surfaced through ``get``/``failed``.
"""

from __future__ import annotations

from typing import Any

from tryable.kernel.errors.base import TryError


class PredicateNotSatisfiedError(TryError):
    """``filter`` was called on a ``Success`` whose value fails the predicate."""

    default_code = "predicate_not_satisfied"

    def __init__(self, value: Any, **kwargs: Any) -> None:
        super().__init__(f"Predicate does not hold for {value!r}", **kwargs)
        self.value = value

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["value"] = repr(self.value)
        return base


class UnsupportedOperationError(TryError):
    """An operation has no meaning for the variant it was called on."""

    default_code = "unsupported_operation"

    def __init__(
        self,
        message: str = "Operation not supported",
        *,
        operation: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.operation = operation


__all__ = ["PredicateNotSatisfiedError", "UnsupportedOperationError"]
