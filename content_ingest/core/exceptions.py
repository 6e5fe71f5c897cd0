"""
Custom exceptions for Content Ingest.

This module provides a hierarchy of custom exceptions for the service.
All exceptions inherit from ContentIngestException and include an error code
and an HTTP status, so the API layer can translate any of them into the
uniform {success, message} envelope without knowing where they came from.
"""

from enum import Enum
from typing import Any


# =============================================================================
# Error Codes Enum
# =============================================================================


class ErrorCode(str, Enum):
    """
    Error codes for Content Ingest exceptions.

    These codes provide a consistent way to identify error types
    across the API and in logging.
    """

    SERVICE_ERROR = "SERVICE_ERROR"
    NOT_FOUND = "NOT_FOUND"
    CONFLICT = "CONFLICT"
    DUPLICATE_KEY = "DUPLICATE_KEY"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_IDENTIFIER = "INVALID_IDENTIFIER"
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
    PAYLOAD_TOO_LARGE = "PAYLOAD_TOO_LARGE"
    AI_RESPONSE_ERROR = "AI_RESPONSE_ERROR"
    PROVIDER_ERROR = "PROVIDER_ERROR"
    AUTHENTICATION_ERROR = "AUTHENTICATION_ERROR"
    RATE_LIMIT_ERROR = "RATE_LIMIT_ERROR"
    UPSTREAM_ERROR = "UPSTREAM_ERROR"
    DATABASE_ERROR = "DATABASE_ERROR"
    STORAGE_ERROR = "STORAGE_ERROR"


# =============================================================================
# Base Exception
# =============================================================================


class ContentIngestException(Exception):
    """
    Base exception for all Content Ingest errors.

    Attributes:
        message: Human-readable error message, returned to the client.
        error_code: Machine-readable error code from ErrorCode enum.
        http_status: Status code used when the error reaches the API layer.
    """

    http_status: int = 500

    def __init__(
        self,
        message: str,
        error_code: str = ErrorCode.SERVICE_ERROR,
        **kwargs: Any,
    ) -> None:
        """
        Initialize the exception.

        Args:
            message: Human-readable error message.
            error_code: Machine-readable error code.
            **kwargs: Additional attributes to set on the exception.
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code

        for key, value in kwargs.items():
            setattr(self, key, value)


# =============================================================================
# Client Errors (4xx)
# =============================================================================


class NotFoundError(ContentIngestException):
    """
    Raised when a record does not exist.

    Attributes:
        resource: Entity label (e.g. "Job description").
        identifier: The id or key that was looked up.
    """

    http_status = 404

    def __init__(
        self,
        message: str,
        resource: str | None = None,
        identifier: str | None = None,
        error_code: str = ErrorCode.NOT_FOUND,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, error_code, **kwargs)
        self.resource = resource
        self.identifier = identifier


class ConflictError(ContentIngestException):
    """Raised when a write would collide with an existing record."""

    http_status = 409

    def __init__(
        self,
        message: str,
        field: str | None = None,
        error_code: str = ErrorCode.CONFLICT,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, error_code, **kwargs)
        self.field = field


class DuplicateRecordError(ConflictError):
    """
    Raised when a unique index rejects an insert or update.

    The message names the offending field the same way for every collection.
    """

    def __init__(
        self,
        field: str,
        value: Any = None,
        error_code: str = ErrorCode.DUPLICATE_KEY,
        **kwargs: Any,
    ) -> None:
        super().__init__(
            f"Duplicate field value: {field}. Please use another value",
            field=field,
            error_code=error_code,
            **kwargs,
        )
        self.value = value


class ContentValidationError(ContentIngestException):
    """
    Exception for business-rule validation failures.

    Named ContentValidationError to avoid conflict with
    pydantic.ValidationError.

    Attributes:
        field: Name of the field that failed validation.
        value: The invalid value (if safe to include).
    """

    http_status = 400

    def __init__(
        self,
        message: str,
        field: str | None = None,
        value: Any = None,
        error_code: str = ErrorCode.VALIDATION_ERROR,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, error_code, **kwargs)
        self.field = field
        self.value = value


class InvalidIdentifierError(ContentValidationError):
    """Raised when a path value cannot be cast to the stored id type."""

    def __init__(self, value: Any, field: str = "_id", **kwargs: Any) -> None:
        super().__init__(
            f"Invalid {field}: {value}",
            field=field,
            value=value,
            error_code=ErrorCode.INVALID_IDENTIFIER,
            **kwargs,
        )


class InvalidCredentialsError(ContentIngestException):
    """Raised when a login does not match a stored user."""

    http_status = 401

    def __init__(
        self,
        message: str = "Invalid credentials",
        error_code: str = ErrorCode.INVALID_CREDENTIALS,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, error_code, **kwargs)


class PayloadTooLargeError(ContentIngestException):
    """Raised when an upload exceeds the configured size limit."""

    http_status = 413

    def __init__(
        self,
        message: str,
        limit: int | None = None,
        error_code: str = ErrorCode.PAYLOAD_TOO_LARGE,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, error_code, **kwargs)
        self.limit = limit


# =============================================================================
# AI Errors
# =============================================================================


class AIResponseError(ContentIngestException):
    """
    Raised when the model answered but the answer is unusable.

    Covers empty completions and text that holds no parseable JSON object.
    """

    def __init__(
        self,
        message: str,
        raw_response: str | None = None,
        error_code: str = ErrorCode.AI_RESPONSE_ERROR,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, error_code, **kwargs)
        self.raw_response = raw_response


class ProviderError(ContentIngestException):
    """
    Exception for LLM provider issues.

    Raised when communication with an LLM provider fails,
    including API errors, timeouts, and authentication issues.

    Attributes:
        provider: Name of the provider (e.g., "openai").
        status_code: HTTP status code from the provider API (if applicable).
    """

    http_status = 502

    def __init__(
        self,
        message: str,
        provider: str,
        status_code: int | None = None,
        error_code: str = ErrorCode.PROVIDER_ERROR,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, error_code, **kwargs)
        self.provider = provider
        self.status_code = status_code


class ProviderAuthenticationError(ProviderError):
    """Raised when the provider rejects our credentials. Never retried."""

    def __init__(self, message: str, provider: str, **kwargs: Any) -> None:
        super().__init__(
            message,
            provider=provider,
            status_code=401,
            error_code=ErrorCode.AUTHENTICATION_ERROR,
            **kwargs,
        )


class RateLimitError(ProviderError):
    """
    Raised when the provider throttles us.

    Attributes:
        retry_after: Seconds until the rate limit resets (if reported).
    """

    http_status = 503

    def __init__(
        self,
        message: str,
        provider: str = "openai",
        retry_after: int | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(
            message,
            provider=provider,
            status_code=429,
            error_code=ErrorCode.RATE_LIMIT_ERROR,
            **kwargs,
        )
        self.retry_after = retry_after


# =============================================================================
# Infrastructure Errors
# =============================================================================


class UpstreamFetchError(ContentIngestException):
    """Raised when a remote page cannot be fetched through the reader."""

    http_status = 502

    def __init__(
        self,
        message: str,
        url: str | None = None,
        error_code: str = ErrorCode.UPSTREAM_ERROR,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, error_code, **kwargs)
        self.url = url


class RepositoryError(ContentIngestException):
    """Raised when a database operation fails for reasons other than the data."""

    def __init__(
        self,
        message: str,
        collection: str | None = None,
        error_code: str = ErrorCode.DATABASE_ERROR,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, error_code, **kwargs)
        self.collection = collection


class StorageError(ContentIngestException):
    """Raised when uploaded bytes cannot be written, read or removed."""

    def __init__(
        self,
        message: str,
        path: str | None = None,
        error_code: str = ErrorCode.STORAGE_ERROR,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, error_code, **kwargs)
        self.path = path
