"""Kernel error hierarchy and classifier — public re-export surface.

Hierarchy::

    TryError
    ├── PredicateNotSatisfiedError   (operations.py)
    ├── UnsupportedOperationError    (operations.py)
    └── ConfigError                  (tryable.config.validation)
        └── InvalidSettingValueError

Classification (classification.py) decides which raised errors are
recoverable and which are fatal.
"""

from tryable.kernel.errors.base import TryError
from tryable.kernel.errors.classification import (
    FATAL_DENYLIST,
    INTERPRETER_FAULTS,
    FatalPolicy,
    get_fatal_policy,
    is_fatal,
    is_recoverable,
    set_fatal_policy,
    use_fatal_policy,
)
from tryable.kernel.errors.operations import (
    PredicateNotSatisfiedError,
    UnsupportedOperationError,
)

__all__ = [
    "FATAL_DENYLIST",
    "INTERPRETER_FAULTS",
    "FatalPolicy",
    "PredicateNotSatisfiedError",
    "TryError",
    "UnsupportedOperationError",
    "get_fatal_policy",
    "is_fatal",
    "is_recoverable",
    "set_fatal_policy",
    "use_fatal_policy",
]
