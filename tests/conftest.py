"""Pytest configuration and fixtures."""

import pytest

from narrowtest.config import configure
from narrowtest.verbose import reset_logger

pytest_plugins = ["pytester"]


@pytest.fixture(autouse=True)
def restore_narrowtest_state():
    """Put the active config and the narrowtest logger back after each test."""
    previous = configure()
    yield

    configure(previous)
    reset_logger()
