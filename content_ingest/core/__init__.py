"""
Core module for Content Ingest.

This module contains configuration and the exception hierarchy shared by
every layer.
"""

from content_ingest.core.config import Settings, get_settings
from content_ingest.core.exceptions import (
    AIResponseError,
    ConflictError,
    ContentIngestException,
    ContentValidationError,
    DuplicateRecordError,
    ErrorCode,
    InvalidCredentialsError,
    InvalidIdentifierError,
    NotFoundError,
    PayloadTooLargeError,
    ProviderAuthenticationError,
    ProviderError,
    RateLimitError,
    RepositoryError,
    StorageError,
    UpstreamFetchError,
)

__all__ = [
    # Config
    "Settings",
    "get_settings",
    # Exceptions
    "ErrorCode",
    "ContentIngestException",
    "NotFoundError",
    "ConflictError",
    "DuplicateRecordError",
    "ContentValidationError",
    "InvalidIdentifierError",
    "InvalidCredentialsError",
    "PayloadTooLargeError",
    "AIResponseError",
    "ProviderError",
    "ProviderAuthenticationError",
    "RateLimitError",
    "UpstreamFetchError",
    "RepositoryError",
    "StorageError",
]
