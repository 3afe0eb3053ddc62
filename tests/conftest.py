"""
Pytest configuration and shared fixtures.
"""

from unittest.mock import Mock

import pytest

from core.domain.value_objects import Severity
from core.error_handler import ErrorHandler
from core.ports.runtime_hooks import RuntimeHooks


class FakeRuntimeHooks(RuntimeHooks):
    """Runtime hooks that record installations instead of touching the process."""

    def __init__(self, reporting_level=Severity.ALL, previous_error_hook=None, last_fatal=None):
        self.reporting_level = int(reporting_level)
        self.previous_error_hook = previous_error_hook
        self.last_fatal = last_fatal
        self.error_hooks = []
        self.shutdown_hooks = []
        self.error_reporting_calls = 0
        self.last_fatal_error_calls = 0

    def set_error_hook(self, callback):
        self.error_hooks.append(callback)
        return self.previous_error_hook

    def register_shutdown_hook(self, callback):
        self.shutdown_hooks.append(callback)

    def last_fatal_error(self):
        self.last_fatal_error_calls += 1
        return self.last_fatal

    def error_reporting(self):
        self.error_reporting_calls += 1
        return self.reporting_level


@pytest.fixture
def hooks():
    """Fixture for fake runtime hooks."""
    return FakeRuntimeHooks()


@pytest.fixture
def logger():
    """Fixture for a mock logger."""
    return Mock(spec=["log"])


@pytest.fixture
def error_handler(hooks):
    """Fixture for an ErrorHandler without a logger."""
    return ErrorHandler(hooks=hooks)


@pytest.fixture
def logging_error_handler(hooks, logger):
    """Fixture for an ErrorHandler with a mock logger."""
    return ErrorHandler(logger=logger, hooks=hooks)
