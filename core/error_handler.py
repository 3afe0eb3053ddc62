"""
Error handler.

Captures runtime error signals and uncaught exceptions and sends them to
a logger. Works as request middleware, as a process-wide error hook and
as a last-chance shutdown hook for fatal errors.
"""

import logging
from typing import Any, Callable, Dict, Optional, Tuple

from core.domain.exceptions import InvalidArgumentError, StructuredError
from core.domain.services import SeverityClassifier
from core.domain.value_objects import (
    CONVERTIBLE_ERRORS,
    FATAL_ERRORS,
    UNHANDLED_BY_ERROR_HOOK,
    LogLevel,
)
from core.infrastructure.runtime_hooks import ProcessRuntimeHooks
from core.metrics import error_responses_total, errors_logged_total
from core.ports.logger import LoggerPort
from core.ports.runtime_hooks import RuntimeHooks

logger = logging.getLogger(__name__)

# Released right before shutdown logging, so an out-of-memory exit still has room to log.
RESERVED_MEMORY_SIZE = 10 * 1024

ERROR_RESPONSE_STATUS = 500
ERROR_RESPONSE_BODY = "Unexpected error"


class ErrorHandler:
    """
    Error handler and logger bridge.

    As middleware it is called with ``(request, response, next)``. Any
    exception escaping ``next`` is logged and replaced by a 500 response.

    ``also_log()`` subscribes severities of runtime signals to be logged,
    installing the error hook and the shutdown hook on first need.
    ``convert_errors_to_exceptions()`` turns recoverable and user errors
    into StructuredError exceptions.
    """

    def __init__(self, logger: Optional[LoggerPort] = None, hooks: Optional[RuntimeHooks] = None):
        """
        Initialize error handler.

        Args:
            logger: Logger to send records to, None to disable logging
            hooks: Runtime hooks, defaults to the current process
        """
        self._logger = logger
        self._hooks = hooks if hooks is not None else ProcessRuntimeHooks()

        self._logged_error_types = 0
        self._convert_fatal_errors = False
        self._error_hook_installed = False
        self._shutdown_hook_installed = False
        self._chained_error_handler = None
        self._reserved_memory: Optional[bytearray] = None
        self._error: Optional[BaseException] = None

    def set_logger(self, logger: Optional[LoggerPort]) -> None:
        """Set the logger errors are sent to."""
        self._logger = logger

    def get_logger(self) -> Optional[LoggerPort]:
        """Get the logger errors are sent to."""
        return self._logger

    def get_error(self) -> Optional[BaseException]:
        """Get the error caught by the last middleware invocation."""
        return self._error

    def get_logged_error_types(self) -> int:
        """Get the mask of runtime signal severities that are logged."""
        return self._logged_error_types

    def get_chained_error_handler(self) -> Optional[Any]:
        """Get the error handler that was installed before ours."""
        return self._chained_error_handler

    def __call__(self, request: Any, response: Any, next_handler: Callable[[Any, Any], Any]) -> Any:
        """
        Run the next handler, turning uncaught exceptions into a 500 response.

        Args:
            request: Request passed to the next handler
            response: Response passed to the next handler, also the base for the error response
            next_handler: Callable ``(request, response) -> response``

        Returns:
            Response of the next handler, or the error response

        Raises:
            InvalidArgumentError: If next_handler is not callable
        """
        if not callable(next_handler):
            raise InvalidArgumentError("'next' should be a callable")

        try:
            return next_handler(request, response)
        except Exception as e:  # pylint: disable=broad-exception-caught
            self._error = e
            self._log_exception(e)
            return self._error_response(response)

    def _error_response(self, response: Any) -> Any:
        """Turn the original response into a generic 500 response."""
        response.status_code = ERROR_RESPONSE_STATUS
        response.write(ERROR_RESPONSE_BODY)
        error_responses_total.inc()
        return response

    # Logging

    def log(self, value: Any, context: Optional[Dict[str, Any]] = None) -> None:
        """
        Log an error, exception or unsupported value.

        Does nothing if no logger is set. Never raises.

        Args:
            value: StructuredError, exception or other value
            context: Extra context for the log record
        """
        if self._logger is None:
            return

        if isinstance(value, StructuredError):
            level, message, record_context = self._structured_error_record(value)
            kind = "error"
        elif isinstance(value, BaseException):
            level, message, record_context = self._exception_record(value)
            kind = "exception"
        elif isinstance(value, str):
            level, message, record_context = LogLevel.WARNING, "Unable to log a string", {}
            kind = "unsupported"
        else:
            level = LogLevel.WARNING
            message = f"Unable to log a {type(value).__name__} object"
            record_context = {}
            kind = "unsupported"

        if context:
            record_context = {**record_context, **context}

        self._write(level, message, record_context, kind)

    def _log_exception(self, exception: BaseException) -> None:
        if self._logger is None:
            return
        level, message, context = self._exception_record(exception)
        self._write(level, message, context, "exception")

    @staticmethod
    def _structured_error_record(error: StructuredError) -> Tuple[LogLevel, str, Dict[str, Any]]:
        level, label = SeverityClassifier.classify(error.severity)
        message = f"{label}: {error.message} at {error.file} line {error.line}"
        context = {
            "error": error,
            "code": error.severity,
            "message": error.message,
            "file": error.file,
            "line": error.line,
        }
        return level, message, context

    @staticmethod
    def _exception_record(exception: BaseException) -> Tuple[LogLevel, str, Dict[str, Any]]:
        name = type(exception).__name__
        try:
            detail = str(exception)
        except Exception:  # pylint: disable=broad-exception-caught
            detail = ""
        message = f"Uncaught {name}: {detail}" if detail else f"Uncaught {name}"
        return LogLevel.ERROR, message, {"exception": exception}

    def _write(self, level: LogLevel, message: str, context: Dict[str, Any], kind: str) -> None:
        """Send a record to the logger, reporting logger failures on the module logger."""
        try:
            self._logger.log(level.value, message, context)
        except Exception:  # pylint: disable=broad-exception-caught
            logger.exception("Error logger failed to log: %s", message)
            return

        errors_logged_total.labels(level=level.value, kind=kind).inc()

    # Runtime signals

    def also_log(self, types: int) -> None:
        """
        Log runtime signals of the given severities.

        Installs the error hook for non-fatal severities and the shutdown
        hook for fatal ones, each at most once.

        Args:
            types: Severity mask
        """
        types = int(types)
        self._logged_error_types |= types

        if types & ~UNHANDLED_BY_ERROR_HOOK:
            self._init_error_handler()

        if types & FATAL_ERRORS:
            self._init_shutdown_function()

    def convert_errors_to_exceptions(self) -> None:
        """Raise recoverable and user errors as StructuredError exceptions."""
        self._convert_fatal_errors = True
        self._init_error_handler()

    def _init_error_handler(self) -> None:
        if self._error_hook_installed:
            return

        self._chained_error_handler = self._hooks.set_error_hook(self.error_handler)
        self._error_hook_installed = True

    def _init_shutdown_function(self) -> None:
        if self._shutdown_hook_installed:
            return

        self._reserved_memory = bytearray(RESERVED_MEMORY_SIZE)
        self._hooks.register_shutdown_hook(self.shutdown_function)
        self._shutdown_hook_installed = True

    def error_handler(
        self,
        code: int,
        message: str,
        file: str = "",
        line: int = 0,
        context: Optional[Dict[str, Any]] = None,
    ) -> bool:
        """
        Handle a runtime error signal.

        Args:
            code: Severity code
            message: Signal message
            file: File the signal was raised in
            line: Line the signal was raised at
            context: Extra information from the runtime

        Returns:
            True if the signal was logged, False to let the runtime handle it

        Raises:
            StructuredError: For recoverable and user errors when conversion is enabled
        """
        if not self._hooks.error_reporting() & code:
            return False

        error = StructuredError(message, code, file, line)
        logged = bool(code & self._logged_error_types)

        if logged:
            self.log(error)

        if self._convert_fatal_errors and code & CONVERTIBLE_ERRORS:
            raise error

        return logged

    def shutdown_function(self) -> None:
        """Log the fatal error that ended the process, if any."""
        self._reserved_memory = None

        error = self._hooks.last_fatal_error()
        if not error:
            return

        if error.type & self._logged_error_types & FATAL_ERRORS:
            self.log(StructuredError(error.message, error.type, error.file, error.line))
