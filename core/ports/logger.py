"""
Logger port (interface).

Any object exposing ``log(level, message, context)`` can be used by the
error handler; this class documents that contract.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict


class LoggerPort(ABC):
    """
    Abstract logger port.

    Level values are the strings emergency, alert, critical, error,
    warning, notice, info and debug.
    """

    @abstractmethod
    def log(self, level: str, message: str, context: Dict[str, Any] = None) -> None:
        """
        Log a message.

        Args:
            level: Log level name
            message: Log message
            context: Structured context for the record
        """
        pass
