"""
Exception handlers.

Every error leaves the API as ``{"success": false, "message": ...}``:

- request or schema validation -> 400 "Validation error: field: msg, ..."
- ContentIngestException      -> its http_status and message
- unmatched route             -> 404 "Not Found - {path}"
- anything else               -> 500 "Internal server error" (logged with traceback)
"""

import logging
from typing import Any, Sequence

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from content_ingest.core.exceptions import ContentIngestException
from content_ingest.models.responses import ErrorResponse

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"

# Location prefixes FastAPI adds that mean nothing to the client.
_LOCATION_PREFIXES = {"body", "query", "path", "header", "cookie", "form"}


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(message=message).model_dump(),
    )


def format_validation_errors(errors: Sequence[dict[str, Any]]) -> str:
    """Join pydantic error entries as "field: msg, field: msg"."""
    parts = []
    for error in errors:
        location = [str(item) for item in error.get("loc", ())]
        if location and location[0] in _LOCATION_PREFIXES:
            location = location[1:]
        field = ".".join(location)
        message = error.get("msg", "invalid value")
        parts.append(f"{field}: {message}" if field else message)
    return "Validation error: " + ", ".join(parts)


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    return error_response(400, format_validation_errors(exc.errors()))


async def pydantic_validation_handler(
    request: Request, exc: ValidationError
) -> JSONResponse:
    return error_response(400, format_validation_errors(exc.errors()))


async def service_error_handler(
    request: Request, exc: ContentIngestException
) -> JSONResponse:
    if exc.http_status >= 500:
        logger.error(
            f"{request.method} {request.url.path} failed: "
            f"{exc.error_code} {exc.message}"
        )
    return error_response(exc.http_status, exc.message)


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    if exc.status_code == 404 and exc.detail == "Not Found":
        return error_response(404, f"Not Found - {request.url.path}")
    response = error_response(exc.status_code, str(exc.detail))
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return error_response(500, INTERNAL_ERROR_MESSAGE)


def register_exception_handlers(app: FastAPI) -> None:
    """Install the envelope handlers on ``app``."""
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(ValidationError, pydantic_validation_handler)
    app.add_exception_handler(ContentIngestException, service_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
