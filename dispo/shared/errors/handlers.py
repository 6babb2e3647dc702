"""
Centralized error handlers for FastAPI.

Maps domain-specific errors to HTTP responses.
No stack traces or internal details are exposed to clients.
All error responses use the ErrorResponse schema.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from dispo.domain.staffing.errors import (
    AuthenticationError,
    EmailNotVerifiedError,
    NotFoundError,
    StaffingDomainError,
    ValidationError,
)

logger = logging.getLogger(__name__)

HTTP_401 = 401
HTTP_403 = 403
HTTP_404 = 404
HTTP_422 = 422
HTTP_500 = 500


def _error_response(status_code: int, error: str, detail: str | None = None) -> JSONResponse:
    """Build a consistent JSON error response."""
    body: dict[str, str | None] = {"error": error}
    if detail:
        body["detail"] = detail
    return JSONResponse(status_code=status_code, content=body)


def register_error_handlers(app: FastAPI) -> None:
    """Register all domain error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(ValidationError)
    async def handle_validation(
        _request: Request, exc: ValidationError
    ) -> JSONResponse:
        """Handle upload policy violations. The reason is user-facing."""
        logger.warning("Upload rejected: %s", exc.reason)
        return _error_response(HTTP_422, "Invalid upload", exc.reason)

    @app.exception_handler(NotFoundError)
    async def handle_not_found(
        _request: Request, exc: NotFoundError
    ) -> JSONResponse:
        """Handle missing events and pending registrations."""
        logger.warning("Not found: %s", exc.message)
        return _error_response(HTTP_404, "Not found", exc.message)

    @app.exception_handler(AuthenticationError)
    async def handle_authentication(
        _request: Request, exc: AuthenticationError
    ) -> JSONResponse:
        logger.warning("Authentication failed: %s", exc.reason)
        return _error_response(HTTP_401, "Authentication failed")

    @app.exception_handler(EmailNotVerifiedError)
    async def handle_email_not_verified(
        _request: Request, exc: EmailNotVerifiedError
    ) -> JSONResponse:
        logger.info("Confirmation refused: email not verified")
        return _error_response(HTTP_403, "Email not verified")

    @app.exception_handler(StaffingDomainError)
    async def handle_staffing_domain(
        _request: Request, exc: StaffingDomainError
    ) -> JSONResponse:
        """Catch-all for unhandled staffing domain errors."""
        logger.error("Unhandled staffing domain error: %s", exc.message)
        return _error_response(HTTP_500, "Internal server error")

    @app.exception_handler(Exception)
    async def handle_unexpected(
        _request: Request, exc: Exception
    ) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return _error_response(HTTP_500, "Internal server error")
