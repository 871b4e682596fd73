"""Error Handlers: global exception handlers for the Sample API.

Invariants:
    - RequestValidationError → 400 with {"errors": [...]}, one entry per violated rule
    - ResourceNotFoundError → 404 with no body
    - SampleApiError → structured JSON with error code, message, severity
    - Exception (catch-all) → never leaks internal details

Design Decisions:
    - Validation failures use 400, not 200 with an error body
    - Four-layer handler: validation, not-found, domain/infrastructure, catch-all
"""

import logging

from fastapi import FastAPI, Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from sample_api.core.errors import (
    ErrorCategory, ErrorSeverity, ResourceNotFoundError, SampleApiError,
)

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_validation_error_handler(app)
    _register_not_found_handler(app)
    _register_sample_api_error_handler(app)
    _register_generic_error_handler(app)


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic validation errors."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
            extra={"path": request.url.path, "method": request.method},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=build_validation_error_response(exc.errors()),
        )


def _register_not_found_handler(app: FastAPI) -> None:
    """Register the bare 404 handler."""

    @app.exception_handler(ResourceNotFoundError)
    async def not_found_handler(request: Request, exc: ResourceNotFoundError):
        logger.info(
            exc.message,
            extra={"error_code": exc.code, "path": request.url.path, "method": request.method},
        )
        return Response(status_code=status.HTTP_404_NOT_FOUND)


def _register_sample_api_error_handler(app: FastAPI) -> None:
    """Register domain/infrastructure error handler."""

    @app.exception_handler(SampleApiError)
    async def sample_api_error_handler(request: Request, exc: SampleApiError):
        """Handle all Sample API domain/infrastructure errors."""
        logger.error(
            f"SampleApiError: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": "An unexpected error occurred",
                    "category": ErrorCategory.INTERNAL.value,
                    "severity": ErrorSeverity.CRITICAL.value,
                },
            },
        )


def build_validation_error_response(errors) -> dict:
    """Build the {"errors": [...]} body from pydantic error dicts."""
    return {
        "errors": [
            {
                "field": ".".join(str(loc) for loc in e["loc"][1:]) or str(e["loc"][0]),
                "message": e["msg"],
                "location": str(e["loc"][0]),
                "type": e["type"],
            }
            for e in errors
        ],
    }
