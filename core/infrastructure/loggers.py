"""
Logger adapters.

Provides a LoggerPort implementation backed by the standard library
logging module, so records end up in the configured JSON handlers.
"""

import logging
from typing import Any, Dict

from core.domain.value_objects import LogLevel
from core.ports.logger import LoggerPort

NOTICE = 25
logging.addLevelName(NOTICE, "NOTICE")

LEVELS = {
    LogLevel.EMERGENCY.value: logging.CRITICAL,
    LogLevel.ALERT.value: logging.CRITICAL,
    LogLevel.CRITICAL.value: logging.CRITICAL,
    LogLevel.ERROR.value: logging.ERROR,
    LogLevel.WARNING.value: logging.WARNING,
    LogLevel.NOTICE.value: NOTICE,
    LogLevel.INFO.value: logging.INFO,
    LogLevel.DEBUG.value: logging.DEBUG,
}


class StdlibLoggerAdapter(LoggerPort):
    """
    Stdlib logging adapter implementing LoggerPort.

    The context is attached to the record as ``context``; an exception in
    the context is passed as ``exc_info`` so formatters render the trace.
    """

    def __init__(self, logger: logging.Logger):
        """
        Initialize adapter.

        Args:
            logger: Stdlib logger records are sent to
        """
        self.logger = logger

    def log(self, level: str, message: str, context: Dict[str, Any] = None) -> None:
        """
        Log a message.

        Args:
            level: Log level name
            message: Log message
            context: Structured context for the record
        """
        context = dict(context or {})
        levelno = LEVELS.get(str(level).lower(), logging.ERROR)

        exc = context.get("exception", context.get("error"))
        exc_info = (type(exc), exc, exc.__traceback__) if isinstance(exc, BaseException) else None

        extra = {"context": {key: _loggable(value) for key, value in context.items()}}
        self.logger.log(levelno, message, exc_info=exc_info, extra=extra)


def _loggable(value: Any) -> Any:
    """Reduce context values to something a JSON formatter can render."""
    if isinstance(value, (str, int, float, bool)) or value is None:
        return value
    try:
        if isinstance(value, BaseException):
            return f"{type(value).__name__}: {value}"
        return repr(value)
    except Exception:  # pylint: disable=broad-exception-caught
        return f"<unrenderable {type(value).__name__}>"
