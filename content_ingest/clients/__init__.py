"""Outbound HTTP clients."""

from content_ingest.clients.http import create_http_client
from content_ingest.clients.reader import PageReader

__all__ = ["PageReader", "create_http_client"]
