"""Shared fixtures: every test starts from the default Try configuration."""

from __future__ import annotations

from typing import Iterator

import pytest
import structlog

from tryable.config import TrySettings, configure


@pytest.fixture(autouse=True)
def _default_try_configuration() -> Iterator[None]:
    configure(TrySettings())
    yield
    configure(TrySettings())
    structlog.reset_defaults()
