"""Test configuration and fixtures."""

import logfire
import pytest


def pytest_configure(config: pytest.Config) -> None:
    # Spans and events are recorded locally only
    logfire.configure(send_to_logfire=False, console=False)
