"""Try[T] — Success, Failure and Lazy variants.

A ``Try`` is the outcome of a computation that may raise::

    of(int, "42")             # Success(42)
    of(int, "forty-two")      # Failure(ValueError(...))
    lazy(load_config)         # Lazy(...), nothing has run yet

Only *recoverable* errors are captured (see
:mod:`tryable.kernel.errors.classification`); fatal ones propagate out of
every constructor and combinator unchanged.

``Lazy`` is call-by-name: every operation invoked on it runs the wrapped
computation again and works on the fresh ``Success``/``Failure``. Nothing
is cached.
"""

from __future__ import annotations

import functools
from typing import Any, Callable, Generic, NoReturn, TypeVar

from tryable.config import get_settings
from tryable.kernel.errors import (
    PredicateNotSatisfiedError,
    UnsupportedOperationError,
    get_fatal_policy,
    is_recoverable,
)
from tryable.kernel.types.option import Nothing, Option, Some
from tryable.observability.logging import get_logger

T = TypeVar("T")
U = TypeVar("U")

_log = get_logger(__name__)


def _immutable(self: Any, name: str, value: Any = None) -> NoReturn:  # noqa: ARG001
    raise AttributeError(f"{type(self).__name__} is immutable")


def _capture(exc: BaseException) -> bool:
    """Classify *exc*; ``True`` means it may become a ``Failure``."""
    recoverable = is_recoverable(exc)
    if get_settings().log_classification:
        fields = {
            "error_type": type(exc).__qualname__,
            "policy": get_fatal_policy().value,
        }
        if recoverable:
            _log.debug("try.failure_captured", **fields)
        else:
            _log.warning("try.fatal_propagated", **fields)
    return recoverable


def attempt(func: Callable[..., T], *args: Any, **kwargs: Any) -> "Success[T] | Failure[T]":
    """Run ``func(*args, **kwargs)`` now and classify the outcome.

    Returns ``Success`` with the return value, or ``Failure`` with the
    raised error when it is recoverable. Fatal errors are re-raised as-is.
    """
    try:
        value = func(*args, **kwargs)
    except BaseException as exc:
        if not _capture(exc):
            raise
        return Failure(exc)
    return Success(value)


def _flatten(outcome: "Success[Any] | Failure[Any]") -> "Try[Any]":
    if isinstance(outcome, Failure):
        return outcome
    inner = outcome.value
    if isinstance(inner, (Success, Failure, Lazy)):
        return inner
    return Failure(TypeError(f"Expected a Try, got {type(inner).__name__}"))


class Success(Generic[T]):
    """Computation completed with a value."""

    __slots__ = ("_value",)
    __setattr__ = _immutable
    __delattr__ = _immutable

    def __init__(self, value: T) -> None:
        object.__setattr__(self, "_value", value)

    @property
    def value(self) -> T:
        return self._value

    def run(self) -> "Success[T]":
        return self

    def is_success(self) -> bool:
        return True

    def is_failure(self) -> bool:
        return False

    def get(self) -> T:
        return self._value

    def get_or_else(self, default: T) -> T:  # noqa: ARG002
        return self._value

    def or_else(self, alternative: "Try[T]") -> "Success[T]":  # noqa: ARG002
        return self

    def foreach(self, func: Callable[[T], Any]) -> None:
        func(self._value)

    def map(self, func: Callable[[T], U]) -> "Success[U] | Failure[U]":
        return attempt(func, self._value)

    def flat_map(self, func: "Callable[[T], Try[U]]") -> "Try[U]":
        return _flatten(attempt(func, self._value))

    def filter(self, predicate: Callable[[T], bool]) -> "Success[T] | Failure[T]":
        outcome = attempt(predicate, self._value)
        if isinstance(outcome, Failure):
            return outcome
        return self if outcome.value else Failure(PredicateNotSatisfiedError(self._value))

    def recover_with(self, func: "Callable[[BaseException], Try[T]]") -> "Success[T]":  # noqa: ARG002
        return self

    def recover(self, func: Callable[[BaseException], T]) -> "Success[T]":  # noqa: ARG002
        return self

    def to_optional(self) -> Option[T]:
        return Some(self._value)

    def failed(self) -> "Failure[BaseException]":
        return Failure(
            UnsupportedOperationError("failed called on Success", operation="failed")
        )

    def __eq__(self, other: Any) -> bool:
        return isinstance(other, Success) and self._value == other._value

    def __hash__(self) -> int:
        return hash((Success, self._value))

    def __repr__(self) -> str:
        return f"Success({self._value!r})"


class Failure(Generic[T]):
    """Computation raised a recoverable error.

    Two failures are equal only when they carry the very same error object.
    The error's traceback and ``__context__`` are pinned at construction;
    :meth:`get` re-raises with exactly those, however often it is called.
    """

    __slots__ = ("_error", "_traceback", "_context")
    __setattr__ = _immutable
    __delattr__ = _immutable

    def __init__(self, error: BaseException) -> None:
        if not isinstance(error, BaseException):
            raise TypeError(f"Failure expects an exception, got {type(error).__name__}")
        object.__setattr__(self, "_error", error)
        object.__setattr__(self, "_traceback", error.__traceback__)
        object.__setattr__(self, "_context", error.__context__)

    @property
    def error(self) -> BaseException:
        return self._error

    def run(self) -> "Failure[T]":
        return self

    def is_success(self) -> bool:
        return False

    def is_failure(self) -> bool:
        return True

    def get(self) -> NoReturn:
        try:
            raise self._error.with_traceback(self._traceback)
        finally:
            self._error.__context__ = self._context

    def get_or_else(self, default: T) -> T:
        return default

    def or_else(self, alternative: "Try[T]") -> "Try[T]":
        return alternative

    def foreach(self, func: Callable[[T], Any]) -> None:  # noqa: ARG002
        return None

    def map(self, func: Callable[[T], U]) -> "Failure[U]":  # noqa: ARG002
        return self  # type: ignore[return-value]

    def flat_map(self, func: "Callable[[T], Try[U]]") -> "Failure[U]":  # noqa: ARG002
        return self  # type: ignore[return-value]

    def filter(self, predicate: Callable[[T], bool]) -> "Failure[T]":  # noqa: ARG002
        return self

    def recover_with(self, func: "Callable[[BaseException], Try[T]]") -> "Try[T]":
        return _flatten(attempt(func, self._error))

    def recover(self, func: Callable[[BaseException], T]) -> "Success[T] | Failure[T]":
        return attempt(func, self._error)

    def to_optional(self) -> Option[T]:
        return Nothing()

    def failed(self) -> "Success[BaseException]":
        return Success(self._error)

    def __eq__(self, other: Any) -> bool:
        return isinstance(other, Failure) and self._error is other._error

    def __hash__(self) -> int:
        return hash((Failure, id(self._error)))

    def __repr__(self) -> str:
        return f"Failure({self._error!r})"


class Lazy(Generic[T]):
    """Deferred computation, re-run on every observation.

    Construction does no work. :meth:`run` (and therefore every other
    operation) calls the thunk again and classifies the new outcome, so side
    effects repeat once per call. ``==``, ``hash`` and ``repr`` never force.
    """

    __slots__ = ("_thunk",)
    __setattr__ = _immutable
    __delattr__ = _immutable

    def __init__(self, thunk: Callable[[], T]) -> None:
        if not callable(thunk):
            raise TypeError(f"Lazy expects a callable, got {type(thunk).__name__}")
        object.__setattr__(self, "_thunk", thunk)

    @classmethod
    def of(cls, thunk: Callable[[], T]) -> "Lazy[T]":
        return cls(thunk)

    def run(self) -> "Success[T] | Failure[T]":
        return attempt(self._thunk)

    def is_success(self) -> bool:
        return self.run().is_success()

    def is_failure(self) -> bool:
        return self.run().is_failure()

    def get(self) -> T:
        return self.run().get()

    def get_or_else(self, default: T) -> T:
        return self.run().get_or_else(default)

    def or_else(self, alternative: "Try[T]") -> "Try[T]":
        return self.run().or_else(alternative)

    def foreach(self, func: Callable[[T], Any]) -> None:
        self.run().foreach(func)

    def map(self, func: Callable[[T], U]) -> "Success[U] | Failure[U]":
        return self.run().map(func)

    def flat_map(self, func: "Callable[[T], Try[U]]") -> "Try[U]":
        return self.run().flat_map(func)

    def filter(self, predicate: Callable[[T], bool]) -> "Success[T] | Failure[T]":
        return self.run().filter(predicate)

    def recover_with(self, func: "Callable[[BaseException], Try[T]]") -> "Try[T]":
        return self.run().recover_with(func)

    def recover(self, func: Callable[[BaseException], T]) -> "Success[T] | Failure[T]":
        return self.run().recover(func)

    def to_optional(self) -> Option[T]:
        return self.run().to_optional()

    def failed(self) -> "Success[BaseException] | Failure[BaseException]":
        return self.run().failed()

    def __repr__(self) -> str:
        return f"Lazy({self._thunk!r})"


type Try[T] = Success[T] | Failure[T] | Lazy[T]


def of(func: Callable[..., T], *args: Any, **kwargs: Any) -> "Success[T] | Failure[T]":
    """Run *func* immediately and capture its outcome as a ``Try``."""
    return attempt(func, *args, **kwargs)


def lazy(func: Callable[..., T], *args: Any, **kwargs: Any) -> Lazy[T]:
    """Defer *func*; it runs each time the returned ``Lazy`` is observed."""
    if args or kwargs:
        return Lazy(functools.partial(func, *args, **kwargs))
    return Lazy(func)


__all__ = ["Failure", "Lazy", "Success", "Try", "attempt", "lazy", "of"]
