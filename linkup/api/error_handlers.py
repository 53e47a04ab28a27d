"""Error Handlers — global exception handlers for the LinkUp API.

Invariants:
    - LinkUpError → its own status with {"status": "error", "message", "error": {...}}
    - RequestValidationError → 400 with field-level details (missing fields, bad IDs)
    - Exception (catch-all) → 500, never leaks internal details

Design Decisions:
    - Three-layer handler: domain (LinkUpError), validation (Pydantic), catch-all (Exception)
    - 4xx domain errors logged at warning, 5xx at error
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from linkup.core.errors import LinkUpError, ErrorSeverity

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_linkup_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_linkup_error_handler(app: FastAPI) -> None:
    """Register LinkUp domain/infrastructure error handler."""

    @app.exception_handler(LinkUpError)
    async def linkup_error_handler(request: Request, exc: LinkUpError):
        """Handle all LinkUp domain/infrastructure errors."""
        log = logger.warning if exc.http_status < 500 else logger.error
        log(
            f"LinkUpError: {exc.message}",
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
        """Handle Pydantic validation errors."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "status": "error",
                "message": "An unexpected error occurred",
                "error": {
                    "code": "INTERNAL_ERROR",
                    "category": "internal",
                    "severity": ErrorSeverity.CRITICAL.value,
                },
            },
        )


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Build structured validation error response."""
    details = [
        {
            "field": ".".join(str(loc) for loc in e["loc"]),
            "message": e["msg"],
            "type": e["type"],
        }
        for e in exc.errors()
    ]
    return {
        "status": "error",
        "message": "Invalid request data",
        "error": {
            "code": "VALIDATION_ERROR",
            "category": "validation",
            "severity": ErrorSeverity.ERROR.value,
            "details": details,
        },
    }
