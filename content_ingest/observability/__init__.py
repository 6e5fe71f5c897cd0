"""Observability package: structured logging and request correlation."""

from content_ingest.observability.logging import (
    configure_logging,
    correlation_id_context,
    get_correlation_id,
    get_logger,
)

__all__ = [
    "configure_logging",
    "correlation_id_context",
    "get_correlation_id",
    "get_logger",
]
