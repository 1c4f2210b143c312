"""
tryable – a Try[T] result type for fallible computations.

Import path convention::

    from tryable import of, lazy, Success, Failure
    from tryable.kernel.errors import FatalPolicy, use_fatal_policy
    from tryable.config import configure
"""

from tryable.kernel.errors import (
    FatalPolicy,
    PredicateNotSatisfiedError,
    TryError,
    UnsupportedOperationError,
    is_fatal,
    is_recoverable,
    use_fatal_policy,
)
from tryable.kernel.types import (
    Failure,
    Lazy,
    Nothing,
    Option,
    Some,
    Success,
    Try,
    attempt,
    lazy,
    of,
)

__version__ = "0.1.0"
__all__ = [
    "Failure",
    "FatalPolicy",
    "Lazy",
    "Nothing",
    "Option",
    "PredicateNotSatisfiedError",
    "Some",
    "Success",
    "Try",
    "TryError",
    "UnsupportedOperationError",
    "__version__",
    "attempt",
    "is_fatal",
    "is_recoverable",
    "lazy",
    "of",
    "use_fatal_policy",
]
