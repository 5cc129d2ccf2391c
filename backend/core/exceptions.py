"""
Exception handlers for consistent API error responses.

Every failure leaves the request with a JSON body of the same shape, so a
storage or validation problem never surfaces as an unhandled crash.
"""

from fastapi import Request, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import OperationalError
import logging

from .error_handling import APIError

logger = logging.getLogger(__name__)


async def handle_api_error(request: Request, exc: APIError) -> JSONResponse:
    """Handle custom API errors"""
    if exc.status_code >= 500:
        logger.error(f"{exc.error_code} at {request.url.path}: {exc.message}")
    else:
        logger.info(f"{exc.error_code} at {request.url.path}: {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "detail": exc.message,
            "error_code": exc.error_code,
            "details": exc.details,
            "path": str(request.url.path),
        },
    )


async def handle_value_error(request: Request, exc: ValueError) -> JSONResponse:
    """Convert ValueError to consistent API response"""
    logger.warning(f"ValueError at {request.url.path}: {str(exc)}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "detail": str(exc),
            "error_code": "VALIDATION_ERROR",
            "path": str(request.url.path),
        },
    )


async def handle_operational_error(
    request: Request, exc: OperationalError
) -> JSONResponse:
    """Database unreachable or locked"""
    logger.error(f"Database operational error at {request.url.path}: {exc.orig}")
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={
            "detail": "Database service temporarily unavailable",
            "error_code": "DATABASE_UNAVAILABLE",
            "path": str(request.url.path),
        },
    )


def register_exception_handlers(app):
    """Register all exception handlers with the FastAPI app"""
    app.add_exception_handler(APIError, handle_api_error)
    app.add_exception_handler(ValueError, handle_value_error)
    app.add_exception_handler(OperationalError, handle_operational_error)
