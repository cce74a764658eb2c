"""
Structured client exception types.

``ClientError`` carries a normalized `ErrorCode`. Two subclasses mark the two
failure classes of the call path:

- ``RequestValidationError``: the outbound request is malformed. Raised
  before any network I/O and propagated to the caller.
- ``TransportError``: the HTTP exchange failed. Raised by transports and
  absorbed by ``ChatModel.call`` into an error ``ChatResponse``.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .error_code import ErrorCode


@dataclass
class ClientError(Exception):
    """Represents a structured client error with a normalized error code.

    Attributes:
        code: Normalized :class:`ErrorCode` classification for the failure.
        message: Human-readable error message suitable for logging.
        provider: Provider key where the error originated.
        model: Optional model name associated with the failure.
        retryable: Hint for callers (this library never retries).
        raw: Optional original exception for diagnostics.
    """

    code: ErrorCode
    message: str
    provider: str = "gemini"
    model: Optional[str] = None
    retryable: bool = False
    raw: Optional[Exception] = None

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"{self.provider}:{self.model or '-'} {self.code.value}: {self.message}"


@dataclass
class RequestValidationError(ClientError):
    """Raised when a request fails validation before dispatch."""

    code: ErrorCode = ErrorCode.VALIDATION
    message: str = "request validation failed"


@dataclass
class TransportError(ClientError):
    """Raised by transports when the HTTP exchange cannot be completed."""

    code: ErrorCode = ErrorCode.UNAVAILABLE
    message: str = "transport failure"
    retryable: bool = True


__all__ = ["ClientError", "RequestValidationError", "TransportError"]
