"""
Core views for health checks and error handler status.
"""

from django.apps import apps
from django.http import JsonResponse
from django.views import View


class HealthView(View):
    """Health check endpoint."""

    def get(self, _request):
        """Return service health and the severities being logged."""
        error_handler = apps.get_app_config("core").error_handler
        return JsonResponse(
            {
                "status": "healthy",
                "service": "error-sink-service",
                "logged_error_types": error_handler.get_logged_error_types(),
                "logger_configured": error_handler.get_logger() is not None,
            }
        )
