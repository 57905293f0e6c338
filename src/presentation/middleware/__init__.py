"""Middleware and exception handlers wrapped around every request."""

from .request_context import RequestContextMiddleware, get_request_id
from .logging import LoggingMiddleware
from .error_handler import error_handler_middleware

__all__ = [
    "RequestContextMiddleware",
    "LoggingMiddleware",
    "error_handler_middleware",
    "get_request_id",
]
