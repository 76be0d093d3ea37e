"""Middleware module for the reference check backend."""

from .logging import RequestResponseLoggingMiddleware, CORRELATION_HEADER

__all__ = [
    "RequestResponseLoggingMiddleware",
    "CORRELATION_HEADER"
]
