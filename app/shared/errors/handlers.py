"""
Centralized error handlers for FastAPI.

Maps domain-specific errors to HTTP responses.
No stack traces or internal details are exposed to clients.
All error responses use the ExceptionResponse schema, and the body's
status always matches the status line.
"""

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.domain.users.errors import (
    ConstraintViolationError,
    UserDomainError,
    UserNotFoundError,
    UserValidationError,
)
from app.shared.errors.schemas import ExceptionResponse
from app.shared.security.headers import SECURE_HEADERS

logger = logging.getLogger(__name__)

HTTP_400 = 400
HTTP_404 = 404
HTTP_500 = 500


def error_response(
    status_code: int, message: str, headers: Mapping[str, str] | None = None
) -> JSONResponse:
    """Build a consistent JSON error response.

    Security headers are set here as well because 500 responses are built
    by ServerErrorMiddleware, outside SecurityHeadersMiddleware.
    """
    body = ExceptionResponse.build(status=status_code, message=message)
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(),
        headers={**SECURE_HEADERS, **(headers or {})},
    )


def describe_validation_errors(errors: Sequence[Any]) -> str:
    """Flatten pydantic error entries into one readable message.

    The first ``loc`` element (body, query, path) is dropped.
    """
    parts = []
    for error in errors:
        location = ".".join(str(part) for part in error.get("loc", ())[1:])
        message = error.get("msg", "Invalid value")
        parts.append(f"{location}: {message}" if location else message)
    return "; ".join(parts) or "Invalid request"


def register_error_handlers(app: FastAPI) -> None:
    """Register all error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(UserValidationError)
    async def handle_user_validation(
        _request: Request, exc: UserValidationError
    ) -> JSONResponse:
        """Handle semantically invalid input (underage, bad date range)."""
        logger.warning("Validation failed: %s", exc.message)
        return error_response(HTTP_400, exc.message)

    @app.exception_handler(UserNotFoundError)
    async def handle_user_not_found(
        _request: Request, exc: UserNotFoundError
    ) -> JSONResponse:
        """Handle missing user errors."""
        logger.warning("User not found: %s", exc.user_id)
        return error_response(HTTP_404, exc.message)

    @app.exception_handler(ConstraintViolationError)
    async def handle_constraint_violation(
        _request: Request, exc: ConstraintViolationError
    ) -> JSONResponse:
        """Handle storage constraint violations (duplicate email, null column)."""
        return error_response(HTTP_400, exc.message)

    @app.exception_handler(UserDomainError)
    async def handle_user_domain(
        _request: Request, exc: UserDomainError
    ) -> JSONResponse:
        """Catch-all for unhandled users domain errors."""
        logger.error("Unhandled users domain error: %s", exc.message)
        return error_response(HTTP_500, "Internal server error")

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(
        _request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Handle malformed request shapes (bad JSON, dates, emails, params)."""
        message = describe_validation_errors(exc.errors())
        logger.warning("Malformed request: %s", message)
        return error_response(HTTP_400, message)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(
        _request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        """Keep framework HTTP errors (unknown route, bad method) in the same shape."""
        return error_response(
            exc.status_code, str(exc.detail), headers=getattr(exc, "headers", None)
        )

    @app.exception_handler(Exception)
    async def handle_unexpected(
        _request: Request, exc: Exception
    ) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return error_response(HTTP_500, "Internal server error")
