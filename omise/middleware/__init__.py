"""Middleware package: exception handlers and request ID."""

from omise.middleware.error_handler import (
    error_meta,
    register_error_handlers,
    status_for_error,
)
from omise.middleware.request_id import RequestIdFilter, RequestIdMiddleware, request_id_var

__all__ = [
    "RequestIdFilter",
    "RequestIdMiddleware",
    "error_meta",
    "register_error_handlers",
    "request_id_var",
    "status_for_error",
]
