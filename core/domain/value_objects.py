"""
Value objects for the error handling domain.

Severity codes, log levels and the record of a fatal error reported by
the host runtime. Severity bit values follow the classic runtime error
constants so masks can be exchanged with configuration as plain integers.
"""
from dataclasses import dataclass
from enum import Enum, IntFlag


class Severity(IntFlag):
    """Runtime error severity codes (bitset)."""

    ERROR = 1
    WARNING = 2
    PARSE = 4
    NOTICE = 8
    CORE_ERROR = 16
    CORE_WARNING = 32
    COMPILE_ERROR = 64
    COMPILE_WARNING = 128
    USER_ERROR = 256
    USER_WARNING = 512
    USER_NOTICE = 1024
    STRICT = 2048
    RECOVERABLE_ERROR = 4096
    DEPRECATED = 8192
    USER_DEPRECATED = 16384
    ALL = 32767


# Errors that terminate the process; only a shutdown hook can still see them.
FATAL_ERRORS = int(Severity.ERROR | Severity.PARSE | Severity.CORE_ERROR | Severity.COMPILE_ERROR)

# Severities that never cause the error hook to be installed by also_log().
UNHANDLED_BY_ERROR_HOOK = FATAL_ERRORS | int(Severity.USER_ERROR | Severity.RECOVERABLE_ERROR)

# Severities raised as exceptions once conversion is enabled.
CONVERTIBLE_ERRORS = int(Severity.RECOVERABLE_ERROR | Severity.USER_ERROR)


class LogLevel(str, Enum):
    """Log level value object."""

    EMERGENCY = "emergency"
    ALERT = "alert"
    CRITICAL = "critical"
    ERROR = "error"
    WARNING = "warning"
    NOTICE = "notice"
    INFO = "info"
    DEBUG = "debug"

    def __str__(self) -> str:
        """Return level as string."""
        return self.value


@dataclass(frozen=True)
class FatalErrorRecord:
    """
    Last fatal error recorded by the host runtime.

    Mirrors the ``{type, message, file, line}`` shape the runtime reports.
    """

    type: int
    message: str
    file: str
    line: int
