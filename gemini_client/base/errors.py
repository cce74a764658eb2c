"""Unified client error taxonomy public surface.

This module re-exports the one-class-per-file implementations under
``gemini_client.base.errors_parts`` to maintain a stable import path.
"""

from .errors_parts.error_code import ErrorCode
from .errors_parts.client_error import ClientError, RequestValidationError, TransportError
from .errors_parts.classification import classify_exception, classify_status

__all__ = [
    "ErrorCode",
    "ClientError",
    "RequestValidationError",
    "TransportError",
    "classify_exception",
    "classify_status",
]
