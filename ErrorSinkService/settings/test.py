"""
Test settings for ErrorSinkService.
"""

from .base import *  # noqa: F403, F401

DEBUG = False

ALLOWED_HOSTS = ["testserver"]

ROOT_URLCONF = "tests.urls"

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

# Tests install hooks on their own error handlers; the app one stays unarmed
ERROR_HANDLER = {
    "LOGGER_NAME": "core.errors",
    "ALSO_LOG": 0,
    "CONVERT_ERRORS_TO_EXCEPTIONS": False,
    "REPORTING_LEVEL": 32767,
}

# Disable logging during tests
LOGGING_CONFIG = None
