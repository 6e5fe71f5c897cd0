"""
API Middleware Package

- logging: access log with correlation IDs and header redaction
"""

from content_ingest.api.middleware.logging import (
    REQUEST_ID_HEADER,
    RequestLoggingMiddleware,
    redact_sensitive_headers,
)

__all__ = [
    "REQUEST_ID_HEADER",
    "RequestLoggingMiddleware",
    "redact_sensitive_headers",
]
