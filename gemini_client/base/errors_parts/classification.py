"""
Error classification helpers mapping exceptions and HTTP statuses to
normalized ErrorCode values.
"""
from __future__ import annotations

from typing import Dict, Optional

import httpx

from .error_code import ErrorCode
from .client_error import ClientError


_HTTP_STATUS_MAP: Dict[int, ErrorCode] = {
    400: ErrorCode.VALIDATION,
    401: ErrorCode.AUTH,
    403: ErrorCode.AUTH,
    404: ErrorCode.NOT_FOUND,
    408: ErrorCode.TIMEOUT,
    409: ErrorCode.CONFLICT,
    422: ErrorCode.VALIDATION,
    429: ErrorCode.RATE_LIMIT,
    500: ErrorCode.SERVER_ERROR,
    502: ErrorCode.TRANSIENT,
    503: ErrorCode.UNAVAILABLE,
    504: ErrorCode.TIMEOUT,
}


def _extract_status(exc: Exception) -> Optional[int]:
    """Attempt to extract an HTTP status code from an exception.

    Checks ``exc.status_code``, ``exc.status`` and ``exc.response.status_code``
    in that order. Returns ``None`` if no valid status can be found.
    """
    for attr in ("status_code", "status"):
        val = getattr(exc, attr, None)
        if isinstance(val, int) and 100 <= val < 600:
            return val
    resp = getattr(exc, "response", None)
    if resp is not None:
        sc = getattr(resp, "status_code", None)
        if isinstance(sc, int) and 100 <= sc < 600:
            return sc
    return None


def classify_status(status: int) -> Optional[ErrorCode]:
    """Map an HTTP status to an :class:`ErrorCode`.

    Returns ``None`` for 2xx statuses. Unlisted 5xx statuses map to
    ``SERVER_ERROR`` and unlisted 4xx statuses to ``VALIDATION``.
    """
    if 200 <= status < 300:
        return None
    if status in _HTTP_STATUS_MAP:
        return _HTTP_STATUS_MAP[status]
    if 500 <= status < 600:
        return ErrorCode.SERVER_ERROR
    if 400 <= status < 500:
        return ErrorCode.VALIDATION
    return ErrorCode.UNKNOWN


def _heuristic_from_message(msg: str) -> Optional[ErrorCode]:
    """Substring heuristic mapping for exceptions without a status."""
    pattern_groups = (
        (ErrorCode.TIMEOUT, ("timeout", "timed out")),
        (ErrorCode.AUTH, ("unauthorized", "forbidden", "api key")),
        (ErrorCode.NOT_FOUND, ("not found", "does not exist")),
        (ErrorCode.UNAVAILABLE, ("unavailable", "connection refused", "name or service not known")),
        (ErrorCode.VALIDATION, ("invalid", "malformed")),
    )
    for code, patterns in pattern_groups:
        if any(p in msg for p in patterns):
            return code
    return None


def classify_exception(exc: Exception) -> ErrorCode:
    """Classify an exception into a normalized :class:`ErrorCode`.

    Precedence:
        1. ClientError passthrough.
        2. Timeout exceptions (stdlib and httpx).
        3. httpx transport errors (connection level).
        4. HTTP status mapping.
        5. Substring heuristics.
        6. ``UNKNOWN`` fallback.
    """
    if isinstance(exc, ClientError):
        return exc.code
    if isinstance(exc, (TimeoutError, httpx.TimeoutException)):
        return ErrorCode.TIMEOUT
    if isinstance(exc, (httpx.NetworkError, ConnectionError)):
        return ErrorCode.UNAVAILABLE
    status = _extract_status(exc)
    if status is not None:
        return classify_status(status) or ErrorCode.UNKNOWN
    code = _heuristic_from_message(str(exc).lower())
    return code if code is not None else ErrorCode.UNKNOWN


__all__ = [
    "classify_exception",
    "classify_status",
    "_extract_status",
    "_HTTP_STATUS_MAP",
]
