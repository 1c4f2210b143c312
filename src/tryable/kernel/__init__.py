"""Kernel – the Try primitive and its error classification.

Only the error layer is re-exported here; import computation types from
:mod:`tryable.kernel.types`.
"""

from tryable.kernel.errors import (
    FatalPolicy,
    PredicateNotSatisfiedError,
    TryError,
    UnsupportedOperationError,
    is_fatal,
    is_recoverable,
)

__all__ = [
    "FatalPolicy",
    "PredicateNotSatisfiedError",
    "TryError",
    "UnsupportedOperationError",
    "is_fatal",
    "is_recoverable",
]
