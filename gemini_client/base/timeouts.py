"""Timeout configuration for the HTTP transport.

This layer enforces no timeouts of its own; the values below configure the
``httpx.Client`` used by the default transport.

get_timeout_config()
    Returns a process-cached :class:`TimeoutConfig`, re-read whenever the
    relevant environment variables change. Supported variables (optional):
        GEMINI_CLIENT_HTTP_TIMEOUT_SECONDS
        GEMINI_CLIENT_CONNECT_TIMEOUT_SECONDS
"""
from __future__ import annotations

import os
from dataclasses import dataclass

import httpx

HTTP_TIMEOUT_ENV = "GEMINI_CLIENT_HTTP_TIMEOUT_SECONDS"
CONNECT_TIMEOUT_ENV = "GEMINI_CLIENT_CONNECT_TIMEOUT_SECONDS"


@dataclass(frozen=True)
class TimeoutConfig:
    """Container for normalized timeout values (seconds).

    Attributes:
        http_timeout_seconds: Read/write/pool timeout for a single exchange.
        connect_timeout_seconds: Timeout for establishing the connection.
    """

    http_timeout_seconds: float = 30.0
    connect_timeout_seconds: float = 10.0

    def to_httpx(self) -> httpx.Timeout:
        """Return the equivalent ``httpx.Timeout``."""
        return httpx.Timeout(self.http_timeout_seconds, connect=self.connect_timeout_seconds)


_CACHED: TimeoutConfig | None = None
_ENV_GUARD: str | None = None


def _parse_env_float(name: str, default: float) -> float:
    """Read a positive float from the environment, else ``default``."""
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        val = float(raw)
    except ValueError:
        return default
    return val if val > 0 else default


def get_timeout_config() -> TimeoutConfig:
    """Return the process-cached `TimeoutConfig` instance."""
    global _CACHED, _ENV_GUARD  # noqa: PLW0603 - documented module cache
    guard = "/".join([os.getenv(HTTP_TIMEOUT_ENV, ""), os.getenv(CONNECT_TIMEOUT_ENV, "")])
    if _CACHED is not None and _ENV_GUARD == guard:
        return _CACHED
    _CACHED = TimeoutConfig(
        http_timeout_seconds=_parse_env_float(HTTP_TIMEOUT_ENV, 30.0),
        connect_timeout_seconds=_parse_env_float(CONNECT_TIMEOUT_ENV, 10.0),
    )
    _ENV_GUARD = guard
    return _CACHED


__all__ = [
    "TimeoutConfig",
    "get_timeout_config",
    "HTTP_TIMEOUT_ENV",
    "CONNECT_TIMEOUT_ENV",
]
