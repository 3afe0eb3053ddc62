"""
Runtime hooks port (interface).

Process-wide error and shutdown hook registration lives behind this
contract so the error handler never touches global interpreter state
directly. Implementations are in the infrastructure layer.
"""
from abc import ABC, abstractmethod
from typing import Any, Callable, Optional

from core.domain.value_objects import FatalErrorRecord

ErrorHook = Callable[..., Any]
ShutdownHook = Callable[[], Any]


class RuntimeHooks(ABC):
    """
    Abstract runtime hooks.

    This is a port in hexagonal architecture - it defines
    what the host runtime offers, not how it is done.
    """

    @abstractmethod
    def set_error_hook(self, callback: ErrorHook) -> Optional[Any]:
        """
        Install the process-wide error signal callback.

        The callback receives ``(code, message, file, line, context)``.

        Args:
            callback: Error signal callback

        Returns:
            Previously installed handler or None
        """
        pass

    @abstractmethod
    def register_shutdown_hook(self, callback: ShutdownHook) -> None:
        """
        Register a callback invoked once at process termination.

        Args:
            callback: Shutdown callback without arguments
        """
        pass

    @abstractmethod
    def last_fatal_error(self) -> Optional[FatalErrorRecord]:
        """
        Get the last fatal error recorded by the runtime.

        Returns:
            Fatal error record or None if there was none
        """
        pass

    @abstractmethod
    def error_reporting(self) -> int:
        """
        Get the currently active reporting mask.

        Returns:
            Severity mask of signals that are reported
        """
        pass
