"""
Prometheus metrics for the error handler.

Counts the records the logger bridge hands to the configured logger.
"""

from prometheus_client import Counter

errors_logged_total = Counter(
    "errors_logged_total",
    "Total errors passed to the error logger",
    ["level", "kind"],
)

error_responses_total = Counter(
    "error_responses_total",
    "Total fallback error responses returned by the middleware",
)
