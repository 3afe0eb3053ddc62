"""
App configuration for the error handler.
"""

import logging

from django.apps import AppConfig
from django.core.signals import got_request_exception

logger = logging.getLogger(__name__)


class CoreConfig(AppConfig):
    """
    App configuration for core.

    Owns the process error handler; middleware fetches it from here.
    """

    name = "core"
    verbose_name = "Error handler"

    error_handler = None

    def ready(self):
        """Build the error handler and arm it from settings."""
        from core.conf import get_error_handler_settings
        from core.error_handler import ErrorHandler
        from core.infrastructure.loggers import StdlibLoggerAdapter
        from core.infrastructure.runtime_hooks import ProcessRuntimeHooks
        from core.middleware.error_handler import record_request_exception

        got_request_exception.connect(record_request_exception, dispatch_uid="core.record_request_exception")

        config = get_error_handler_settings()

        self.error_handler = ErrorHandler(
            logger=StdlibLoggerAdapter(logging.getLogger(config["LOGGER_NAME"])),
            hooks=ProcessRuntimeHooks(reporting_level=config["REPORTING_LEVEL"]),
        )

        if config["ALSO_LOG"]:
            self.error_handler.also_log(config["ALSO_LOG"])
        if config["CONVERT_ERRORS_TO_EXCEPTIONS"]:
            self.error_handler.convert_errors_to_exceptions()

        logger.info(
            "Error handler ready",
            extra={
                "also_log": self.error_handler.get_logged_error_types(),
                "convert_errors": bool(config["CONVERT_ERRORS_TO_EXCEPTIONS"]),
            },
        )
