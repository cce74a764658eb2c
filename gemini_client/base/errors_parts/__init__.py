"""Errors parts package public surface.

Prefer importing from `gemini_client.base.errors` for the stable surface.
"""

from .error_code import ErrorCode
from .client_error import ClientError, RequestValidationError, TransportError
from .classification import classify_exception, classify_status

__all__ = [
    "ErrorCode",
    "ClientError",
    "RequestValidationError",
    "TransportError",
    "classify_exception",
    "classify_status",
]
