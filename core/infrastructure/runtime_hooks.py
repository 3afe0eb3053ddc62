"""
Process runtime hooks.

Implements RuntimeHooks on top of the interpreter's global hooks:
warnings are the error signals, ``atexit`` runs the shutdown hook and a
``sys.excepthook`` recorder keeps the last fatal error around for it.
"""

import atexit
import logging
import sys
import traceback
import warnings
from typing import Any, Optional

from core.domain.exceptions import InvalidArgumentError
from core.domain.signals import USER_CATEGORIES, severity_for_exception, severity_for_warning
from core.domain.value_objects import FatalErrorRecord, Severity
from core.ports.runtime_hooks import ErrorHook, RuntimeHooks, ShutdownHook

logger = logging.getLogger(__name__)


class ProcessRuntimeHooks(RuntimeHooks):
    """
    Runtime hooks bound to the current Python process.

    Only one instance should have hooks installed at a time, since the
    hooks replace process-wide state.
    """

    def __init__(self, reporting_level: int = Severity.ALL):
        """
        Initialize runtime hooks.

        Args:
            reporting_level: Mask of severities reported to the error hook
        """
        self.reporting_level = int(reporting_level)
        self._last_fatal: Optional[FatalErrorRecord] = None
        self._previous_excepthook = None

    def set_error_hook(self, callback: ErrorHook) -> Optional[Any]:
        """
        Replace ``warnings.showwarning`` with a hook calling ``callback``.

        Warnings the callback does not report as handled are passed on to
        the previous ``showwarning``.

        Args:
            callback: Error signal callback

        Returns:
            The previous ``showwarning`` function
        """
        previous = warnings.showwarning

        def showwarning(message, category, filename, lineno, file=None, line=None):
            handled = callback(
                severity_for_warning(category),
                str(message),
                filename,
                lineno,
                {"category": getattr(category, "__name__", str(category))},
            )
            if not handled and previous is not None:
                previous(message, category, filename, lineno, file, line)

        warnings.showwarning = showwarning
        logger.debug("Installed error hook, chaining %r", previous)
        return previous

    def register_shutdown_hook(self, callback: ShutdownHook) -> None:
        """
        Register ``callback`` with ``atexit``.

        Also installs the uncaught exception recorder, so the callback can
        query the error that ended the process.

        Args:
            callback: Shutdown callback without arguments
        """
        if self._previous_excepthook is None:
            self._previous_excepthook = sys.excepthook
            sys.excepthook = self._record_uncaught
        atexit.register(callback)
        logger.debug("Registered shutdown hook %r", callback)

    def last_fatal_error(self) -> Optional[FatalErrorRecord]:
        """Get the last uncaught exception as a fatal error record."""
        return self._last_fatal

    def error_reporting(self) -> int:
        """Get the currently active reporting mask."""
        return self.reporting_level

    def _record_uncaught(self, exc_type, exc_value, exc_tb):
        """Record an uncaught exception and pass it on to the previous hook."""
        if not issubclass(exc_type, KeyboardInterrupt):
            self._last_fatal = _fatal_error_record(exc_type, exc_value, exc_tb)

        previous = self._previous_excepthook or sys.__excepthook__
        previous(exc_type, exc_value, exc_tb)


def _fatal_error_record(exc_type, exc_value, exc_tb) -> FatalErrorRecord:
    """Build a fatal error record from exception info."""
    file, line = "", 0
    if isinstance(exc_value, SyntaxError):
        file, line = exc_value.filename or "", exc_value.lineno or 0
    elif exc_tb is not None:
        frame = traceback.extract_tb(exc_tb)[-1]
        file, line = frame.filename, frame.lineno or 0

    detail = str(exc_value) if exc_value is not None else ""
    message = f"Uncaught {exc_type.__name__}: {detail}" if detail else f"Uncaught {exc_type.__name__}"

    return FatalErrorRecord(
        type=severity_for_exception(exc_type),
        message=message,
        file=file,
        line=line,
    )


def trigger_error(message: str, severity: int = Severity.USER_NOTICE) -> None:
    """
    Emit a user level error signal.

    Args:
        message: Signal message
        severity: One of the USER_* severities

    Raises:
        InvalidArgumentError: If severity is not a user level severity
    """
    category = USER_CATEGORIES.get(severity)
    if category is None:
        raise InvalidArgumentError(f"Invalid severity for trigger_error: {severity}")

    warnings.warn(message, category, stacklevel=2)
