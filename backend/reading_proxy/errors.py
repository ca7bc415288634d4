"""Custom exceptions and centralized FastAPI error handlers."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class ReadingProxyError(Exception):
    """Base exception with HTTP status code."""

    def __init__(self, message: str, status_code: int = 500):
        super().__init__(message)
        self.status_code = status_code


class ConfigurationError(ReadingProxyError):
    """Required startup configuration is missing."""


class UpstreamError(ReadingProxyError):
    """The NLT API could not be reached or answered with a non-2xx status."""

    def __init__(
        self,
        message: str,
        upstream_status: int | None = None,
        upstream_reason: str | None = None,
    ):
        super().__init__(message, status_code=500)
        self.upstream_status = upstream_status
        self.upstream_reason = upstream_reason


class InvalidDateError(ReadingProxyError):
    def __init__(self, date: str):
        super().__init__(
            f"Invalid date: {date!r}. Expected YYYY-MM-DD",
            status_code=400,
        )


def register_error_handlers(app: FastAPI) -> None:
    """Register centralized exception handlers on the FastAPI app."""

    @app.exception_handler(UpstreamError)
    async def handle_upstream_error(_request: Request, exc: UpstreamError):
        logger.error(f"Error fetching reading: {exc}")
        return JSONResponse({"error": str(exc)}, status_code=exc.status_code)

    @app.exception_handler(ReadingProxyError)
    async def handle_proxy_error(_request: Request, exc: ReadingProxyError):
        return JSONResponse({"error": str(exc)}, status_code=exc.status_code)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_error(_request: Request, exc: StarletteHTTPException):
        if exc.status_code == 404:
            return JSONResponse({"error": "Not found"}, status_code=404)
        return JSONResponse(
            {"error": str(exc.detail)},
            status_code=exc.status_code,
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def handle_unexpected(_request: Request, exc: Exception):
        logger.exception(f"Unhandled error: {exc}")
        return JSONResponse(
            {"error": "Internal server error"},
            status_code=500,
        )
