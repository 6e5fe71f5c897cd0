"""
Structured Logging Module

JSON logging through structlog with a per-request correlation ID.

Pattern: Singleton configuration (configure once at startup)

The standard library root logger is pointed at the same stream so modules
that log through ``logging.getLogger(__name__)`` (routes, middleware) end up
next to the structlog events from the service layer.
"""

import contextvars
import logging
import sys
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Generator, Optional, TextIO

import structlog
from structlog.types import EventDict, Processor


_configured: bool = False
_service_name: Optional[str] = None


# =============================================================================
# Correlation ID Context
# =============================================================================

_correlation_id_var: contextvars.ContextVar[Optional[str]] = contextvars.ContextVar(
    "correlation_id", default=None
)


def set_correlation_id(correlation_id: str) -> None:
    """Set the correlation ID for the current context."""
    _correlation_id_var.set(correlation_id)


def get_correlation_id() -> Optional[str]:
    """Return the current correlation ID, or None outside a request."""
    return _correlation_id_var.get()


def clear_correlation_id() -> None:
    """Clear the correlation ID for the current context."""
    _correlation_id_var.set(None)


@contextmanager
def correlation_id_context(correlation_id: str) -> Generator[None, None, None]:
    """
    Bind a correlation ID for the duration of a block.

    Example:
        >>> with correlation_id_context("req-12345"):
        ...     logger.info("classifying page")
    """
    token = _correlation_id_var.set(correlation_id)
    try:
        yield
    finally:
        _correlation_id_var.reset(token)


# =============================================================================
# Custom Processors
# =============================================================================


def add_correlation_id(
    logger: logging.Logger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Add the correlation ID to the event if one is bound."""
    correlation_id = get_correlation_id()
    if correlation_id is not None:
        event_dict["correlation_id"] = correlation_id
    return event_dict


def add_service_name(
    logger: logging.Logger, _method_name: str, event_dict: EventDict
) -> EventDict:
    """Stamp every event with the configured service name."""
    if _service_name:
        event_dict.setdefault("service", _service_name)
    return event_dict


def add_timestamp(
    logger: logging.Logger, _method_name: str, event_dict: EventDict
) -> EventDict:
    """Add an ISO 8601 UTC timestamp."""
    event_dict["timestamp"] = datetime.now(timezone.utc).isoformat()
    return event_dict


def rename_level(
    logger: logging.Logger, _method_name: str, event_dict: EventDict
) -> EventDict:
    """Rename log_level to level for cleaner output."""
    if "log_level" in event_dict:
        event_dict["level"] = event_dict.pop("log_level")
    return event_dict


# =============================================================================
# Configuration
# =============================================================================


def configure_logging(
    level: str = "INFO",
    stream: Optional[TextIO] = None,
    service_name: Optional[str] = None,
    force: bool = False,
) -> None:
    """
    Configure structlog for the application.

    Subsequent calls are no-ops unless force=True.

    Args:
        level: Minimum level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        stream: Output stream (default: sys.stdout)
        service_name: Value for the "service" key on every event
        force: Reconfigure even if already configured (tests)
    """
    global _configured, _service_name

    if _configured and not force:
        return

    _service_name = service_name
    output = stream or sys.stdout

    processors: list[Processor] = [
        structlog.stdlib.add_log_level,
        add_timestamp,
        add_service_name,
        add_correlation_id,
        rename_level,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.JSONRenderer(),
    ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(_level_to_int(level)),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=output),
        cache_logger_on_first_use=False,
    )

    logging.basicConfig(
        level=_level_to_int(level),
        stream=output,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        force=force,
    )

    _configured = True


def reset_logging() -> None:
    """
    Reset logging configuration state.

    WARNING: This should only be used in tests.
    """
    global _configured, _service_name
    _configured = False
    _service_name = None


def get_logger(name: str) -> structlog.BoundLogger:
    """
    Get a structured logger bound with its module name.

    Configures logging with defaults if startup has not done so yet.

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.info("record created", collection="blogs", record_id="...")
    """
    configure_logging()
    return structlog.get_logger().bind(logger=name)


def _level_to_int(level: str) -> int:
    """Convert level string to logging int."""
    levels = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }
    return levels.get(level.upper(), logging.INFO)
