"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from chessrules.config import EngineSettings, configure


@pytest.fixture(autouse=True)
def _strict_settings() -> Iterator[None]:
    """Run every test with apply_move re-checking legality, then reset."""
    configure(EngineSettings(check_preconditions=True))
    yield
    configure(None)
