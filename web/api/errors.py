"""API error responses."""

from datetime import UTC, datetime

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from loguru import logger

from app.errors import AnalyticsError, AuthError, PermissionDeniedError, ValidationError


class InternalServerError(AnalyticsError):
    """Request failed for a server-side reason; message is safe to expose."""


def _timestamp() -> str:
    return datetime.now(UTC).isoformat()


def error_response(exc: AnalyticsError) -> JSONResponse:
    """Map an analytics error to its HTTP status and body."""
    if isinstance(exc, ValidationError):
        return JSONResponse(
            status_code=400,
            content={"error": "Bad Request", "message": exc.message, "details": exc.details},
        )
    if isinstance(exc, AuthError):
        return JSONResponse(status_code=401, content={"error": "Unauthorized", "message": exc.message})
    if isinstance(exc, PermissionDeniedError):
        return JSONResponse(status_code=403, content={"error": "Forbidden", "message": exc.message})

    message = exc.message if isinstance(exc, InternalServerError) else "Internal server error"
    return JSONResponse(
        status_code=500,
        content={"error": "Internal Server Error", "message": message, "timestamp": _timestamp()},
    )


def register_error_handlers(app: FastAPI) -> None:
    """Install handlers for the analytics error taxonomy and a catch-all 500."""

    @app.exception_handler(AnalyticsError)
    async def handle_analytics_error(request: Request, exc: AnalyticsError) -> JSONResponse:
        response = error_response(exc)
        if response.status_code >= 500:
            logger.error("{} {} failed: {}", request.method, request.url.path, exc)
        else:
            logger.info("{} {} rejected ({}): {}", request.method, request.url.path, response.status_code, exc)
        return response

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
        logger.opt(exception=exc).error("{} {} crashed: {}", request.method, request.url.path, exc)
        return error_response(AnalyticsError(str(exc)))
