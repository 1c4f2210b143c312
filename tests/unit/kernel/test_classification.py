"""Unit tests for fatal / recoverable classification."""

from __future__ import annotations

import asyncio

import pytest

from tryable.kernel.errors import (
    FatalPolicy,
    get_fatal_policy,
    is_fatal,
    is_recoverable,
    set_fatal_policy,
    use_fatal_policy,
)


class CustomSignal(BaseException):
    """A BaseException outside both the Exception category and the denylist."""


# ---------------------------------------------------------------------------
# CATEGORY policy (default)
# ---------------------------------------------------------------------------


class TestCategoryPolicy:
    @pytest.mark.parametrize(
        "exc",
        [ValueError("v"), KeyError("k"), OSError("io"), RuntimeError("r"), ZeroDivisionError()],
    )
    def test_ordinary_exceptions_are_recoverable(self, exc: Exception) -> None:
        assert is_recoverable(exc)
        assert not is_fatal(exc)

    @pytest.mark.parametrize(
        "exc",
        [
            MemoryError(),
            RecursionError(),
            SystemError(),
            KeyboardInterrupt(),
            SystemExit(1),
            GeneratorExit(),
            asyncio.CancelledError(),
        ],
    )
    def test_interpreter_faults_and_signals_are_fatal(self, exc: BaseException) -> None:
        assert is_fatal(exc)

    def test_custom_base_exception_is_fatal(self) -> None:
        assert is_fatal(CustomSignal())

    def test_is_default(self) -> None:
        assert get_fatal_policy() is FatalPolicy.CATEGORY


# ---------------------------------------------------------------------------
# DENYLIST policy
# ---------------------------------------------------------------------------


class TestDenylistPolicy:
    def test_custom_base_exception_is_recoverable(self) -> None:
        assert is_recoverable(CustomSignal(), FatalPolicy.DENYLIST)

    @pytest.mark.parametrize(
        "exc",
        [MemoryError(), RecursionError(), KeyboardInterrupt(), SystemExit(0), asyncio.CancelledError()],
    )
    def test_denylisted_types_are_fatal(self, exc: BaseException) -> None:
        assert is_fatal(exc, FatalPolicy.DENYLIST)

    def test_ordinary_exception_is_recoverable(self) -> None:
        assert is_recoverable(ValueError(), FatalPolicy.DENYLIST)

    def test_policy_given_as_string(self) -> None:
        assert is_recoverable(CustomSignal(), "denylist")
        assert not is_fatal(CustomSignal(), "denylist")
        assert is_fatal(CustomSignal(), "category")

    def test_unknown_policy_string_rejected(self) -> None:
        with pytest.raises(ValueError):
            is_recoverable(ValueError(), "lenient")

    def test_subclass_of_denylisted_type_is_fatal(self) -> None:
        class Exhausted(MemoryError):
            pass

        assert is_fatal(Exhausted(), FatalPolicy.DENYLIST)


# ---------------------------------------------------------------------------
# Active policy management
# ---------------------------------------------------------------------------


class TestActivePolicy:
    def test_set_returns_previous(self) -> None:
        previous = set_fatal_policy(FatalPolicy.DENYLIST)
        assert previous is FatalPolicy.CATEGORY
        assert get_fatal_policy() is FatalPolicy.DENYLIST

    def test_set_accepts_string(self) -> None:
        set_fatal_policy("denylist")
        assert get_fatal_policy() is FatalPolicy.DENYLIST

    def test_unknown_policy_rejected(self) -> None:
        with pytest.raises(ValueError):
            set_fatal_policy("whatever")
        assert get_fatal_policy() is FatalPolicy.CATEGORY

    def test_active_policy_drives_default_classification(self) -> None:
        assert is_fatal(CustomSignal())
        set_fatal_policy(FatalPolicy.DENYLIST)
        assert is_recoverable(CustomSignal())

    def test_use_fatal_policy_restores(self) -> None:
        with use_fatal_policy(FatalPolicy.DENYLIST) as active:
            assert active is FatalPolicy.DENYLIST
            assert is_recoverable(CustomSignal())
        assert get_fatal_policy() is FatalPolicy.CATEGORY

    def test_use_fatal_policy_restores_after_error(self) -> None:
        with pytest.raises(RuntimeError):
            with use_fatal_policy("denylist"):
                raise RuntimeError("inside")
        assert get_fatal_policy() is FatalPolicy.CATEGORY
