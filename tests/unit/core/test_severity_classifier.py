"""
Unit tests for the severity classifier and structured errors.
"""
import pytest

from core.domain.exceptions import DomainException, InvalidArgumentError, StructuredError
from core.domain.services import SeverityClassifier
from core.domain.value_objects import LogLevel, Severity

SEVERITY_TABLE = [
    (Severity.ERROR, LogLevel.ERROR, "Fatal error"),
    (Severity.USER_ERROR, LogLevel.ERROR, "Fatal error"),
    (Severity.RECOVERABLE_ERROR, LogLevel.ERROR, "Fatal error"),
    (Severity.WARNING, LogLevel.WARNING, "Warning"),
    (Severity.USER_WARNING, LogLevel.WARNING, "Warning"),
    (Severity.PARSE, LogLevel.CRITICAL, "Parse error"),
    (Severity.NOTICE, LogLevel.NOTICE, "Notice"),
    (Severity.USER_NOTICE, LogLevel.NOTICE, "Notice"),
    (Severity.CORE_ERROR, LogLevel.CRITICAL, "Core error"),
    (Severity.CORE_WARNING, LogLevel.WARNING, "Core warning"),
    (Severity.COMPILE_ERROR, LogLevel.CRITICAL, "Compile error"),
    (Severity.COMPILE_WARNING, LogLevel.WARNING, "Compile warning"),
    (Severity.STRICT, LogLevel.INFO, "Strict standards"),
    (Severity.DEPRECATED, LogLevel.INFO, "Deprecated"),
    (Severity.USER_DEPRECATED, LogLevel.INFO, "Deprecated"),
    (99999999, LogLevel.ERROR, "Unknown error"),
]


class TestSeverityClassifier:
    """Tests for SeverityClassifier service."""

    @pytest.mark.parametrize("code,level,label", SEVERITY_TABLE)
    def test_classify(self, code, level, label):
        """Test every severity resolves to its level and label."""
        assert SeverityClassifier.classify(code) == (level, label)

    @pytest.mark.parametrize("code", [0, -1, Severity.ERROR | Severity.WARNING, Severity.ALL])
    def test_unrecognized_codes_are_unknown(self, code):
        """Test combined and unknown codes fall back to unknown error."""
        assert SeverityClassifier.classify(code) == (LogLevel.ERROR, "Unknown error")

    def test_non_integer_code_is_unknown(self):
        """Test classification never raises."""
        assert SeverityClassifier.classify("warning") == (LogLevel.ERROR, "Unknown error")

    def test_plain_int_matches_flag(self):
        """Test raw integers classify like the flags."""
        assert SeverityClassifier.classify(2) == SeverityClassifier.classify(Severity.WARNING)


class TestStructuredError:
    """Tests for StructuredError exception."""

    def test_attributes(self):
        """Test structured error carries the signal details."""
        error = StructuredError("no good", Severity.RECOVERABLE_ERROR, "foo.py", 42)

        assert str(error) == "no good"
        assert error.message == "no good"
        assert error.severity == Severity.RECOVERABLE_ERROR
        assert error.file == "foo.py"
        assert error.line == 42
        assert error.code == "STRUCTURED_ERROR"
        assert isinstance(error, DomainException)

    def test_attributes_are_read_only(self):
        """Test severity and location cannot be reassigned."""
        error = StructuredError("no good", Severity.WARNING, "foo.py", 42)
        with pytest.raises(AttributeError):
            error.line = 1

    def test_domain_code_is_not_severity(self):
        """Test the domain error code stays fixed whatever the severity."""
        for severity in (Severity.WARNING, Severity.USER_ERROR):
            error = StructuredError("no good", severity)
            assert error.code == "STRUCTURED_ERROR"
            assert error.severity == severity


class TestInvalidArgumentError:
    """Tests for InvalidArgumentError exception."""

    def test_is_type_error(self):
        """Test invalid argument errors are type errors."""
        error = InvalidArgumentError()
        assert isinstance(error, TypeError)
        assert error.code == "INVALID_ARGUMENT"
