"""Test configuration and fixtures."""

import logfire
import pytest

from tests.di.config import TEST_PINS

# Instrumentation in create_app needs a configured Logfire; keep it local
logfire.configure(send_to_logfire=False, console=False)


@pytest.fixture
def valid_pin() -> str:
    """A PIN accepted by the test configuration."""
    return TEST_PINS[0]
