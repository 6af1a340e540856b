"""Custom exception hierarchy and handlers."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class AppException(Exception):
    """Base application exception."""

    status_code = status.HTTP_400_BAD_REQUEST
    code = "app_error"

    def __init__(self, message: str, **details: Any) -> None:
        self.message = message
        self.details = details
        super().__init__(message)


class ValidationException(AppException):
    """Raised when input is missing or malformed."""

    code = "validation_error"


class InvalidOperationException(AppException):
    """Raised when an operation does not apply to the target's current state."""

    code = "invalid_operation"


class ConflictException(AppException):
    """Raised when an operation would duplicate an active record."""

    code = "conflict"


class UnauthenticatedException(AppException):
    """Raised when the caller has no valid credentials."""

    status_code = status.HTTP_401_UNAUTHORIZED
    code = "unauthenticated"


class ForbiddenException(AppException):
    """Raised when the caller lacks the role or ownership for operation."""

    status_code = status.HTTP_403_FORBIDDEN
    code = "forbidden"


class NotFoundException(AppException):
    """Raised when entity is not found."""

    status_code = status.HTTP_404_NOT_FOUND
    code = "not_found"


class ConfigurationException(AppException):
    """Raised when required server-side configuration is missing."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    code = "configuration_error"


def _failure(status_code: int, message: str, code: str, **extra: Any) -> JSONResponse:
    content = {"success": False, "message": message, "error": code}
    content.update(extra)
    return JSONResponse(status_code=status_code, content=jsonable_encoder(content))


async def app_exception_handler(_: Request, exc: AppException) -> JSONResponse:
    """Handle custom domain exceptions."""
    if isinstance(exc, ConfigurationException):
        logger.error("Configuration error: %s", exc.message)
        return _failure(exc.status_code, "Server configuration error", exc.code)
    return _failure(exc.status_code, exc.message, exc.code, **exc.details)


async def validation_exception_handler(_: Request, exc: RequestValidationError) -> JSONResponse:
    """Report malformed request payloads as 400 with field errors."""
    errors = [
        f"{'.'.join(str(part) for part in error['loc'] if part != 'body')}: {error['msg']}"
        for error in exc.errors()
    ]
    return _failure(
        status.HTTP_400_BAD_REQUEST,
        "Validation error",
        ValidationException.code,
        errors=errors,
    )


async def http_exception_handler(_: Request, exc: HTTPException) -> JSONResponse:
    """Handle FastAPI HTTP exceptions in unified shape."""
    return _failure(exc.status_code, str(exc.detail), "http_error")


async def unhandled_exception_handler(_: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions."""
    logger.exception("Unhandled error: %s", exc)
    return _failure(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error", "internal_error")


def register_exception_handlers(app: FastAPI) -> None:
    """Register global exception handlers."""
    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
