"""Error Handlers — global exception handlers for the contact API.

Invariants:
    - ContactApiError → its http_status with {"error": message}
    - RequestValidationError → 400 {"error": "Invalid input data", "details": [...]}
    - Exception (catch-all) → 500 {"error": str(exc)}
    - Every handled error is logged with error_code and path
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from contact_api.core.errors import ContactApiError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_contact_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_contact_error_handler(app: FastAPI) -> None:
    """Register domain/infrastructure error handler."""

    @app.exception_handler(ContactApiError)
    async def contact_error_handler(request: Request, exc: ContactApiError):
        """Handle all typed contact API errors."""
        log = logger.warning if exc.http_status < 500 else logger.error
        log(
            f"ContactApiError: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle malformed bodies and wrongly typed fields."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
            extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: 500 with the exception message."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"error_code": "UNEXPECTED_ERROR", "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": str(exc) or exc.__class__.__name__},
        )


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Build validation error body with per-field details."""
    return {
        "error": "Invalid input data",
        "details": [
            {
                "field": ".".join(str(loc) for loc in e["loc"]),
                "message": e["msg"],
                "type": e["type"],
            }
            for e in exc.errors()
        ],
    }
