"""
Error handler middleware.

Django adapter for the error handler: uncaught exceptions in the view
layer and in the middleware below are logged and replaced by a generic
500 response.
"""

import sys
from typing import Callable, Optional

from django.apps import apps
from django.core.exceptions import BadRequest, PermissionDenied, SuspiciousOperation
from django.http import Http404, HttpRequest, HttpResponse
from django.http.multipartparser import MultiPartParserError

from core.error_handler import ErrorHandler

# Exceptions Django answers with its own 4xx responses.
PASSTHROUGH_EXCEPTIONS = (Http404, PermissionDenied, BadRequest, SuspiciousOperation, MultiPartParserError)

REQUEST_EXCEPTION_ATTR = "_error_handler_exception"


def record_request_exception(sender, request=None, **kwargs):
    """
    Remember the exception Django turned into a 500 response.

    Receiver for ``got_request_exception``. Django sends the signal from
    inside its exception handling, so the exception is the one being handled.
    """
    exception = sys.exc_info()[1]
    if request is not None and isinstance(exception, Exception):
        setattr(request, REQUEST_EXCEPTION_ATTR, exception)


class ErrorHandlerMiddleware:
    """
    Middleware wrapping the request cycle in the error handler.

    Django converts exceptions into responses before they reach outer
    middleware. View exceptions are routed through ``process_exception``.
    Exceptions of the middleware below are picked up from the request,
    where ``record_request_exception`` stores them.
    """

    def __init__(self, get_response: Callable, error_handler: Optional[ErrorHandler] = None):
        """Initialize middleware."""
        self.get_response = get_response
        self.error_handler = error_handler or apps.get_app_config("core").error_handler

    def __call__(self, request: HttpRequest) -> HttpResponse:
        """
        Process request through the error handler.

        Args:
            request: HTTP request

        Returns:
            HTTP response, or a 500 response on an uncaught exception
        """
        return self.error_handler(request, HttpResponse(), self._next)

    def process_exception(self, request: HttpRequest, exception: Exception) -> Optional[HttpResponse]:
        """
        Handle an exception raised by a view.

        Args:
            request: HTTP request
            exception: Exception raised by the view

        Returns:
            500 response, or None for exceptions Django answers itself
        """
        if isinstance(exception, PASSTHROUGH_EXCEPTIONS):
            return None

        def reraise(_request, _response):
            raise exception

        return self.error_handler(request, HttpResponse(), reraise)

    def _next(self, request: HttpRequest, _response: HttpResponse) -> HttpResponse:
        response = self.get_response(request)

        exception = getattr(request, REQUEST_EXCEPTION_ATTR, None)
        if exception is not None:
            delattr(request, REQUEST_EXCEPTION_ATTR)
            raise exception

        return response
