"""HTTP request/response logging middleware for FastAPI."""

import time
import logging
from typing import Callable, Optional, Set
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from ....infrastructure.logging import (
    generate_correlation_id,
    set_correlation_id,
    clear_correlation_id,
    get_logger
)

logger = get_logger(__name__)

CORRELATION_HEADER = "X-Correlation-ID"

# Headers to exclude from logging (sensitive information)
EXCLUDED_HEADERS = {
    'authorization',
    'cookie',
    'set-cookie',
    'x-api-key',
    'proxy-authorization',
}

DEFAULT_EXCLUDED_PATHS = {
    '/health',
    '/docs',
    '/redoc',
    '/openapi.json',
    '/favicon.ico'
}


class RequestResponseLoggingMiddleware(BaseHTTPMiddleware):
    """Logs each HTTP request and response under a correlation id.

    The id is taken from the incoming X-Correlation-ID header when present,
    generated otherwise, and echoed back on the response.
    """

    def __init__(self, app: ASGIApp, exclude_paths: Optional[Set[str]] = None):
        super().__init__(app)
        self.exclude_paths = exclude_paths if exclude_paths is not None else DEFAULT_EXCLUDED_PATHS

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        """Process the request and response with logging."""
        if request.url.path in self.exclude_paths:
            return await call_next(request)

        correlation_id = request.headers.get(CORRELATION_HEADER) or generate_correlation_id()
        set_correlation_id(correlation_id)
        start_time = time.perf_counter()

        try:
            self._log_request(request)
            response = await call_next(request)

            duration_ms = (time.perf_counter() - start_time) * 1000
            response.headers[CORRELATION_HEADER] = correlation_id
            self._log_response(request, response, duration_ms)
            return response

        except Exception as exc:
            duration_ms = (time.perf_counter() - start_time) * 1000
            logger.error(
                f"Request failed: {request.method} {request.url.path}",
                extra={
                    "request_method": request.method,
                    "request_path": request.url.path,
                    "duration_ms": round(duration_ms, 2),
                    "error": str(exc),
                    "error_type": type(exc).__name__
                },
                exc_info=True
            )
            raise

        finally:
            clear_correlation_id()

    def _log_request(self, request: Request) -> None:
        client_host = request.client.host if request.client else 'unknown'
        logger.info(
            f"HTTP Request: {request.method} {request.url.path}",
            extra={
                "request_method": request.method,
                "request_path": request.url.path,
                "request_query": str(request.query_params) if request.query_params else None,
                "request_headers": sanitize_headers(dict(request.headers)),
                "client_host": client_host,
                "user_agent": request.headers.get('user-agent', 'unknown'),
                "content_length": request.headers.get('content-length')
            }
        )

    def _log_response(self, request: Request, response: Response, duration_ms: float) -> None:
        logger.log(
            status_log_level(response.status_code),
            f"HTTP Response: {request.method} {request.url.path} -> {response.status_code} ({duration_ms:.2f}ms)",
            extra={
                "request_method": request.method,
                "request_path": request.url.path,
                "response_status": response.status_code,
                "duration_ms": round(duration_ms, 2),
                "content_type": response.headers.get('content-type')
            }
        )


def sanitize_headers(headers: dict) -> dict:
    """Redact sensitive headers."""
    return {
        key: "[REDACTED]" if key.lower() in EXCLUDED_HEADERS else value
        for key, value in headers.items()
    }


def status_log_level(status_code: int) -> int:
    """Server errors log at ERROR, client errors at WARNING."""
    if status_code >= 500:
        return logging.ERROR
    if status_code >= 400:
        return logging.WARNING
    return logging.INFO
