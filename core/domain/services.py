"""
Error handling domain services.

Domain services contain logic that doesn't naturally
fit within a single value object.
"""
from typing import Dict, Tuple

from core.domain.value_objects import LogLevel, Severity

UNKNOWN_ERROR = (LogLevel.ERROR, "Unknown error")

_SEVERITY_TABLE: Dict[int, Tuple[LogLevel, str]] = {
    Severity.ERROR: (LogLevel.ERROR, "Fatal error"),
    Severity.USER_ERROR: (LogLevel.ERROR, "Fatal error"),
    Severity.RECOVERABLE_ERROR: (LogLevel.ERROR, "Fatal error"),
    Severity.WARNING: (LogLevel.WARNING, "Warning"),
    Severity.USER_WARNING: (LogLevel.WARNING, "Warning"),
    Severity.PARSE: (LogLevel.CRITICAL, "Parse error"),
    Severity.NOTICE: (LogLevel.NOTICE, "Notice"),
    Severity.USER_NOTICE: (LogLevel.NOTICE, "Notice"),
    Severity.CORE_ERROR: (LogLevel.CRITICAL, "Core error"),
    Severity.CORE_WARNING: (LogLevel.WARNING, "Core warning"),
    Severity.COMPILE_ERROR: (LogLevel.CRITICAL, "Compile error"),
    Severity.COMPILE_WARNING: (LogLevel.WARNING, "Compile warning"),
    Severity.STRICT: (LogLevel.INFO, "Strict standards"),
    Severity.DEPRECATED: (LogLevel.INFO, "Deprecated"),
    Severity.USER_DEPRECATED: (LogLevel.INFO, "Deprecated"),
}


class SeverityClassifier:
    """Domain service mapping severity codes to log levels."""

    @staticmethod
    def classify(code: int) -> Tuple[LogLevel, str]:
        """
        Classify a severity code.

        Only single severity codes are recognized; combined masks and
        unknown values resolve to "Unknown error".

        Args:
            code: Raw severity code

        Returns:
            Tuple of (log level, human readable label)
        """
        try:
            return _SEVERITY_TABLE.get(int(code), UNKNOWN_ERROR)
        except (TypeError, ValueError):
            return UNKNOWN_ERROR

