"""
Unit tests for the stdlib logger adapter.
"""
import logging

import pytest

from core.infrastructure.loggers import NOTICE, StdlibLoggerAdapter


@pytest.fixture
def adapter():
    """Fixture for an adapter on a test logger."""
    return StdlibLoggerAdapter(logging.getLogger("tests.errors"))


class TestStdlibLoggerAdapter:
    """Tests for StdlibLoggerAdapter."""

    @pytest.mark.parametrize(
        "level,levelno",
        [
            ("emergency", logging.CRITICAL),
            ("alert", logging.CRITICAL),
            ("critical", logging.CRITICAL),
            ("error", logging.ERROR),
            ("warning", logging.WARNING),
            ("notice", NOTICE),
            ("info", logging.INFO),
            ("debug", logging.DEBUG),
            ("bogus", logging.ERROR),
        ],
    )
    def test_levels(self, adapter, caplog, level, levelno):
        """Test level names map onto stdlib levels."""
        with caplog.at_level(logging.DEBUG, logger="tests.errors"):
            adapter.log(level, "message")

        assert caplog.records[0].levelno == levelno

    def test_notice_level_name(self):
        """Test the notice level is registered."""
        assert logging.getLevelName(NOTICE) == "NOTICE"

    def test_context_attached(self, adapter, caplog):
        """Test context is attached to the record."""
        with caplog.at_level(logging.DEBUG, logger="tests.errors"):
            adapter.log("warning", "Warning: no good at foo.py line 42", {"code": 2, "file": "foo.py", "line": 42})

        record = caplog.records[0]
        assert record.getMessage() == "Warning: no good at foo.py line 42"
        assert record.context == {"code": 2, "file": "foo.py", "line": 42}
        assert record.exc_info is None

    def test_exception_becomes_exc_info(self, adapter, caplog):
        """Test an exception in the context is logged with its traceback."""
        try:
            raise ValueError("boom")
        except ValueError as e:
            exc = e

        with caplog.at_level(logging.DEBUG, logger="tests.errors"):
            adapter.log("error", "Uncaught ValueError: boom", {"exception": exc})

        record = caplog.records[0]
        assert record.exc_info[1] is exc
        assert record.context == {"exception": "ValueError: boom"}

    def test_unserializable_context_is_reduced(self, adapter, caplog):
        """Test context values are reduced to loggable values."""
        with caplog.at_level(logging.DEBUG, logger="tests.errors"):
            adapter.log("info", "message", {"items": [1, 2]})

        assert caplog.records[0].context == {"items": "[1, 2]"}

    def test_unrenderable_exception_in_context(self, adapter, caplog):
        """Test an exception with a failing __str__ does not break the record."""

        class UnprintableError(Exception):
            def __str__(self):
                raise ValueError("cannot render")

        with caplog.at_level(logging.DEBUG, logger="tests.errors"):
            adapter.log("error", "Uncaught UnprintableError", {"exception": UnprintableError()})

        assert caplog.records[0].context == {"exception": "<unrenderable UnprintableError>"}
