"""
Error handler configuration.

Reads the ``ERROR_HANDLER`` dict from Django settings, falling back to
defaults for missing keys.
"""

from typing import Any, Dict

from django.conf import settings

from core.domain.value_objects import Severity

DEFAULTS: Dict[str, Any] = {
    "LOGGER_NAME": "core.errors",
    "ALSO_LOG": 0,
    "CONVERT_ERRORS_TO_EXCEPTIONS": False,
    "REPORTING_LEVEL": int(Severity.ALL),
}


def get_error_handler_settings() -> Dict[str, Any]:
    """
    Get error handler settings.

    Returns:
        Settings dict with all keys of DEFAULTS present
    """
    configured = getattr(settings, "ERROR_HANDLER", None) or {}
    return {**DEFAULTS, **configured}
