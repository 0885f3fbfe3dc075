"""HTTP exceptions and exception handlers.

Every error leaving the API has the same body::

    {"error": "<kind>", "message": "<human text>"}

with ``kind`` one of ``validation_error``, ``not_found``, ``internal_error``
or ``service_unavailable``. The request ID is appended when the request ID
middleware has assigned one.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from fastapi import FastAPI, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import ORJSONResponse
from pydantic import BaseModel
from starlette.exceptions import HTTPException as StarletteHTTPException

from dinner_decider.observability.logging import get_logger


if TYPE_CHECKING:
    from fastapi import Request

logger = get_logger(__name__)


class ErrorKind:
    """Machine-readable error kinds returned in the ``error`` field."""

    VALIDATION = "validation_error"
    NOT_FOUND = "not_found"
    INTERNAL = "internal_error"
    SERVICE_UNAVAILABLE = "service_unavailable"


class ErrorResponse(BaseModel):
    """Structured error response."""

    error: str
    message: str
    request_id: str | None = None


class AppException(Exception):
    """Base application exception rendered as an ``ErrorResponse``."""

    def __init__(self, status_code: int, error: str, message: str) -> None:
        self.status_code = status_code
        self.error = error
        self.message = message
        super().__init__(message)


class ValidationException(AppException):
    """Client supplied missing or malformed input."""

    def __init__(self, message: str) -> None:
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            error=ErrorKind.VALIDATION,
            message=message,
        )


class NotFoundException(AppException):
    """Resource not found exception."""

    def __init__(self, resource: str, identifier: Any) -> None:
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            error=ErrorKind.NOT_FOUND,
            message=f"{resource} with id '{identifier}' not found",
        )


class InternalErrorException(AppException):
    """Unexpected failure surfaced with its underlying message."""

    def __init__(self, message: str) -> None:
        super().__init__(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            error=ErrorKind.INTERNAL,
            message=message,
        )


class ServiceUnavailableException(AppException):
    """A backing service could not be reached."""

    def __init__(self, message: str = "Service temporarily unavailable") -> None:
        super().__init__(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            error=ErrorKind.SERVICE_UNAVAILABLE,
            message=message,
        )


def _get_request_id(request: Request) -> str | None:
    return getattr(request.state, "request_id", None)


def _error_response(
    request: Request,
    status_code: int,
    error: str,
    message: str,
) -> ORJSONResponse:
    return ORJSONResponse(
        status_code=status_code,
        content=ErrorResponse(
            error=error,
            message=message,
            request_id=_get_request_id(request),
        ).model_dump(exclude_none=True),
    )


def _status_to_kind(status_code: int) -> str:
    if status_code == status.HTTP_404_NOT_FOUND:
        return ErrorKind.NOT_FOUND
    if status_code == status.HTTP_503_SERVICE_UNAVAILABLE:
        return ErrorKind.SERVICE_UNAVAILABLE
    if status_code < status.HTTP_500_INTERNAL_SERVER_ERROR:
        return ErrorKind.VALIDATION
    return ErrorKind.INTERNAL


def _describe_validation_errors(exc: RequestValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(loc) for loc in error["loc"] if loc != "body")
        parts.append(f"{location}: {error['msg']}" if location else error["msg"])
    return "; ".join(parts) or "Request validation failed"


def setup_exception_handlers(app: FastAPI) -> None:
    """Register exception handlers with the FastAPI application."""

    @app.exception_handler(AppException)
    async def app_exception_handler(
        request: Request,
        exc: AppException,
    ) -> ORJSONResponse:
        return _error_response(request, exc.status_code, exc.error, exc.message)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request,
        exc: StarletteHTTPException,
    ) -> ORJSONResponse:
        return _error_response(
            request,
            exc.status_code,
            _status_to_kind(exc.status_code),
            str(exc.detail),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> ORJSONResponse:
        """Malformed path parameters and bodies are client errors (400)."""
        return _error_response(
            request,
            status.HTTP_400_BAD_REQUEST,
            ErrorKind.VALIDATION,
            _describe_validation_errors(exc),
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request,
        exc: Exception,
    ) -> ORJSONResponse:
        logger.opt(exception=exc).error("Unhandled exception")
        return _error_response(
            request,
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            ErrorKind.INTERNAL,
            "An unexpected error occurred",
        )
