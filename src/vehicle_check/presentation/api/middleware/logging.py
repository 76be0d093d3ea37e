"""HTTP request/response logging middleware for the reference check backend."""

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


class RequestResponseLoggingMiddleware(BaseHTTPMiddleware):
    """Middleware to log HTTP requests and responses with correlation IDs."""

    def __init__(self, app: ASGIApp, exclude_paths: Optional[Set[str]] = None):
        """
        Initialize the logging middleware.

        Args:
            app: The ASGI application
            exclude_paths: Set of paths to exclude from logging
        """
        super().__init__(app)
        self.exclude_paths = exclude_paths or {
            '/health',
            '/docs',
            '/redoc',
            '/openapi.json',
            '/favicon.ico'
        }

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        """Process the request and response with logging."""
        if request.url.path in self.exclude_paths:
            return await call_next(request)

        correlation_id = request.headers.get(CORRELATION_HEADER) or generate_correlation_id()
        set_correlation_id(correlation_id)
        start_time = time.time()

        try:
            logger.info(
                f"HTTP Request: {request.method} {request.url.path}",
                extra={
                    "request_method": request.method,
                    "request_path": request.url.path,
                    "request_query": str(request.query_params) if request.query_params else None,
                    "content_type": request.headers.get('content-type')
                }
            )

            response = await call_next(request)
            duration_ms = (time.time() - start_time) * 1000
            response.headers[CORRELATION_HEADER] = correlation_id

            if response.status_code >= 500:
                log_level = logging.ERROR
            elif response.status_code >= 400:
                log_level = logging.WARNING
            else:
                log_level = logging.INFO

            logger.log(
                log_level,
                f"HTTP Response: {request.method} {request.url.path} -> {response.status_code} ({duration_ms:.2f}ms)",
                extra={
                    "request_method": request.method,
                    "request_path": request.url.path,
                    "response_status": response.status_code,
                    "duration_ms": round(duration_ms, 2)
                }
            )
            return response

        except Exception as exc:
            duration_ms = (time.time() - start_time) * 1000
            logger.error(
                f"Request failed: {request.method} {request.url.path}",
                extra={
                    "request_method": request.method,
                    "request_path": request.url.path,
                    "duration_ms": duration_ms,
                    "error": str(exc),
                    "error_type": type(exc).__name__
                },
                exc_info=True
            )
            raise

        finally:
            clear_correlation_id()
