"""
Domain exceptions.

Exceptions raised by the error handler itself: invalid usage of the
public API and runtime error signals converted into exceptions.
"""


class DomainException(Exception):
    """Base exception for all domain exceptions."""

    def __init__(self, message: str, code: str = None):
        """
        Initialize domain exception.

        Args:
            message: Human-readable error message
            code: Machine-readable error code
        """
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__


class ErrorHandlerException(DomainException):
    """Base exception for error handler related errors."""

    pass


class InvalidArgumentError(ErrorHandlerException, TypeError):
    """Raised when the error handler is used with an invalid argument."""

    def __init__(self, message: str = "Invalid argument"):
        super().__init__(message, code="INVALID_ARGUMENT")


class StructuredError(ErrorHandlerException):
    """
    A runtime error signal turned into an exception.

    Carries the severity code and source location of the signal.
    Attributes are read-only once the error is created.

    ``code`` is the domain error code shared by all domain exceptions and
    is always ``"STRUCTURED_ERROR"``. The runtime severity code of the
    signal, logged as ``code`` in the record context, is ``severity``.
    """

    def __init__(self, message: str, severity: int, file: str = "", line: int = 0):
        """
        Initialize structured error.

        Args:
            message: Message of the runtime signal
            severity: Severity code of the signal
            file: File the signal was raised in
            line: Line the signal was raised at
        """
        super().__init__(message, code="STRUCTURED_ERROR")
        self._severity = int(severity)
        self._file = file
        self._line = int(line)

    @property
    def severity(self) -> int:
        """Severity code of the signal."""
        return self._severity

    @property
    def file(self) -> str:
        """File the signal was raised in."""
        return self._file

    @property
    def line(self) -> int:
        """Line the signal was raised at."""
        return self._line

    def __reduce__(self):
        return (self.__class__, (self.message, self._severity, self._file, self._line))
