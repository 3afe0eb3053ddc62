"""
Base Django settings for ErrorSinkService.

These settings are shared across all environments.
Environment-specific overrides are in test.py
"""
import os
from pathlib import Path

from .logging import get_logging_config

# Build paths inside the project
BASE_DIR = Path(__file__).resolve().parent.parent.parent

# SECURITY WARNING: keep the secret key used in production secret!
SECRET_KEY = os.environ.get("DJANGO_SECRET_KEY", "django-insecure-error-sink-service-development-key")

DEBUG = os.environ.get("DJANGO_DEBUG", "false").lower() in ("1", "true", "yes")

ALLOWED_HOSTS = os.environ.get("ALLOWED_HOSTS", "localhost,127.0.0.1").split(",")

# Application definition
INSTALLED_APPS = [
    "django.contrib.contenttypes",
    # Local apps
    "core.apps.CoreConfig",
]

MIDDLEWARE = [
    # Outermost; failures below it are picked up through got_request_exception
    "core.middleware.error_handler.ErrorHandlerMiddleware",
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
]

ROOT_URLCONF = "ErrorSinkService.urls"

WSGI_APPLICATION = "ErrorSinkService.wsgi.application"

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": BASE_DIR / "db.sqlite3",
    }
}

# Internationalization
LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# Error handler
# Severity masks use the runtime error bit values, 32767 is Severity.ALL
ERROR_HANDLER = {
    "LOGGER_NAME": os.environ.get("ERROR_HANDLER_LOGGER", "core.errors"),
    "ALSO_LOG": int(os.environ.get("ERROR_HANDLER_ALSO_LOG", "32767")),
    "CONVERT_ERRORS_TO_EXCEPTIONS": os.environ.get("ERROR_HANDLER_CONVERT_ERRORS", "false").lower()
    in ("1", "true", "yes"),
    "REPORTING_LEVEL": int(os.environ.get("ERROR_HANDLER_REPORTING_LEVEL", "32767")),
}

# Observability
LOGGING = get_logging_config(os.environ.get("ENVIRONMENT", "development"))
