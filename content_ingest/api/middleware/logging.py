"""
Request Logging Middleware

Logs method, path, status and duration of every request, and binds a
correlation ID (the caller's X-Request-ID, or a new uuid4) so that every log
line emitted while serving the request carries it. The ID is echoed back in
the response header.
"""

import logging
import time
import uuid
from typing import Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from content_ingest.observability.logging import correlation_id_context

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"

# Headers that should be redacted (case-insensitive substring match)
SENSITIVE_HEADER_PATTERNS = [
    "authorization",
    "api-key",
    "apikey",
    "api_key",
    "x-auth-token",
    "cookie",
]


def redact_sensitive_headers(headers: dict[str, str]) -> dict[str, str]:
    """
    Replace credential-bearing header values with [REDACTED].

    Args:
        headers: Dictionary of HTTP headers

    Returns:
        A copy of the headers, safe to log.
    """
    return {
        key: "[REDACTED]"
        if any(pattern in key.lower() for pattern in SENSITIVE_HEADER_PATTERNS)
        else value
        for key, value in headers.items()
    }


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Access log with correlation IDs. Responses >= 400 log at WARNING."""

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Response]
    ) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        start_time = time.perf_counter()
        method = request.method
        path = request.url.path
        client_host = request.client.host if request.client else "unknown"

        with correlation_id_context(request_id):
            logger.debug(
                f"Request: {method} {path} from {client_host} "
                f"headers={redact_sensitive_headers(dict(request.headers))}"
            )

            try:
                response = await call_next(request)
            except Exception as e:
                duration_ms = (time.perf_counter() - start_time) * 1000
                logger.error(
                    f"Request failed: {method} {path} request_id={request_id} "
                    f"error={type(e).__name__}: {e} duration={duration_ms:.2f}ms"
                )
                raise

            duration_ms = (time.perf_counter() - start_time) * 1000
            log_level = logging.WARNING if response.status_code >= 400 else logging.INFO
            logger.log(
                log_level,
                f"{method} {path} {response.status_code} from {client_host} "
                f"request_id={request_id} duration={duration_ms:.2f}ms",
            )

        response.headers[REQUEST_ID_HEADER] = request_id
        return response
