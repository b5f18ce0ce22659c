"""Global pytest configuration."""

from __future__ import annotations

import pytest

from pathfinder.logging import reset_logging, setup_root_logger


@pytest.fixture(autouse=True)
def _fresh_logging():
    """Give every test the default package logging setup."""
    reset_logging()
    setup_root_logger()
    yield
    reset_logging()
