"""
HTTP Client Factory

Builds httpx.AsyncClient instances with pooled connections, timeouts and
connection-level retries.

Pattern: Factory pattern for creating configured HTTP clients
"""

from typing import Optional

import httpx


DEFAULT_TIMEOUT_SECONDS: float = 30.0
MAX_CONNECTIONS: int = 50
MAX_KEEPALIVE: int = 10
RETRY_COUNT: int = 2
USER_AGENT = "content-ingest/1.0"


def create_http_client(timeout_seconds: Optional[float] = None) -> httpx.AsyncClient:
    """
    Create a configured HTTP client.

    Args:
        timeout_seconds: Request timeout in seconds (default: 30.0)

    Returns:
        httpx.AsyncClient: Configured async HTTP client

    Example:
        >>> client = create_http_client(timeout_seconds=60.0)
        >>> async with client:
        ...     response = await client.get("https://r.jina.ai/https://example.com")
    """
    timeout = timeout_seconds if timeout_seconds is not None else DEFAULT_TIMEOUT_SECONDS

    limits = httpx.Limits(
        max_connections=MAX_CONNECTIONS,
        max_keepalive_connections=MAX_KEEPALIVE,
    )

    # Transport retries cover connection failures only, not HTTP error statuses
    transport = httpx.AsyncHTTPTransport(retries=RETRY_COUNT, limits=limits)

    return httpx.AsyncClient(
        timeout=httpx.Timeout(timeout),
        headers={"User-Agent": USER_AGENT},
        transport=transport,
        follow_redirects=True,
    )
