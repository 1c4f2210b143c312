"""Fatal vs recoverable error classification.

A *recoverable* error may be captured as a ``Failure`` value. A *fatal* one
must propagate untouched through every constructor and combinator.

Two policies are available::

    CATEGORY   recoverable iff isinstance(exc, Exception) and exc is not an
               interpreter fault (MemoryError, RecursionError, SystemError)
    DENYLIST   fatal iff exc is one of a fixed set of known-fatal types;
               anything else, custom BaseException subclasses included,
               is recoverable

``CATEGORY`` is the default. The active policy is process-wide; use
:func:`use_fatal_policy` to swap it for a block.
"""

from __future__ import annotations

import asyncio
import contextlib
import enum
from typing import Final, Iterator


class FatalPolicy(enum.Enum):
    """How raised errors are partitioned into fatal and recoverable."""

    CATEGORY = "category"
    DENYLIST = "denylist"


# Filed under Exception by Python, but they signal the interpreter itself is in trouble.
INTERPRETER_FAULTS: Final[tuple[type[BaseException], ...]] = (
    MemoryError,
    RecursionError,
    SystemError,
)

FATAL_DENYLIST: Final[tuple[type[BaseException], ...]] = INTERPRETER_FAULTS + (
    KeyboardInterrupt,
    SystemExit,
    GeneratorExit,
    asyncio.CancelledError,
)

_active_policy: FatalPolicy = FatalPolicy.CATEGORY


def get_fatal_policy() -> FatalPolicy:
    return _active_policy


def set_fatal_policy(policy: FatalPolicy | str) -> FatalPolicy:
    """Install *policy* process-wide and return the previously active one."""
    global _active_policy
    previous = _active_policy
    _active_policy = FatalPolicy(policy)
    return previous


@contextlib.contextmanager
def use_fatal_policy(policy: FatalPolicy | str) -> Iterator[FatalPolicy]:
    """Temporarily switch the active policy::

        with use_fatal_policy(FatalPolicy.DENYLIST):
            ...
    """
    previous = set_fatal_policy(policy)
    try:
        yield get_fatal_policy()
    finally:
        set_fatal_policy(previous)


def is_recoverable(exc: BaseException, policy: FatalPolicy | str | None = None) -> bool:
    """Return ``True`` when *exc* may be captured as a ``Failure``."""
    policy = _active_policy if policy is None else FatalPolicy(policy)
    if policy is FatalPolicy.DENYLIST:
        return not isinstance(exc, FATAL_DENYLIST)
    return isinstance(exc, Exception) and not isinstance(exc, INTERPRETER_FAULTS)


def is_fatal(exc: BaseException, policy: FatalPolicy | str | None = None) -> bool:
    return not is_recoverable(exc, policy)


__all__ = [
    "FATAL_DENYLIST",
    "INTERPRETER_FAULTS",
    "FatalPolicy",
    "get_fatal_policy",
    "is_fatal",
    "is_recoverable",
    "set_fatal_policy",
    "use_fatal_policy",
]
