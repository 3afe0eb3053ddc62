"""
Warning categories carrying a severity.

Python has no native notion of user errors, user notices or recoverable
errors. These categories let code emit such signals through the
``warnings`` machinery so the error handler can intercept them.
"""
from core.domain.value_objects import Severity


class SeverityWarning(Warning):
    """Base category for warnings that carry an explicit severity."""

    severity = Severity.WARNING


class UserNoticeWarning(SeverityWarning):
    """User level notice."""

    severity = Severity.USER_NOTICE


class UserErrorWarning(SeverityWarning):
    """User level error."""

    severity = Severity.USER_ERROR


class RecoverableErrorWarning(SeverityWarning):
    """Error the program can recover from."""

    severity = Severity.RECOVERABLE_ERROR


class StrictStandardsWarning(SeverityWarning):
    """Suggestion about interoperability or forward compatibility."""

    severity = Severity.STRICT


# Checked in order, so subclasses come before their bases.
WARNING_SEVERITIES = (
    (DeprecationWarning, Severity.DEPRECATED),
    (PendingDeprecationWarning, Severity.DEPRECATED),
    (FutureWarning, Severity.USER_DEPRECATED),
    (UserWarning, Severity.USER_WARNING),
    (SyntaxWarning, Severity.COMPILE_WARNING),
    (ImportWarning, Severity.CORE_WARNING),
    (ResourceWarning, Severity.NOTICE),
)

EXCEPTION_SEVERITIES = (
    (SyntaxError, Severity.PARSE),
    (SystemError, Severity.CORE_ERROR),
    (ImportError, Severity.COMPILE_ERROR),
)

USER_CATEGORIES = {
    Severity.USER_NOTICE: UserNoticeWarning,
    Severity.USER_WARNING: UserWarning,
    Severity.USER_ERROR: UserErrorWarning,
    Severity.USER_DEPRECATED: FutureWarning,
}


def severity_for_warning(category: type) -> int:
    """
    Map a warning category to a severity code.

    Args:
        category: Warning class

    Returns:
        Severity code, WARNING when the category is not recognized
    """
    if isinstance(category, type) and issubclass(category, SeverityWarning):
        return int(category.severity)
    for base, severity in WARNING_SEVERITIES:
        if isinstance(category, type) and issubclass(category, base):
            return int(severity)
    return int(Severity.WARNING)


def severity_for_exception(exc_type: type) -> int:
    """Map an uncaught exception type to a fatal severity code."""
    for base, severity in EXCEPTION_SEVERITIES:
        if isinstance(exc_type, type) and issubclass(exc_type, base):
            return int(severity)
    return int(Severity.ERROR)
