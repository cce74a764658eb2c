"""Base shared constants for the Gemini client layers.

Central location to avoid scattering magic strings across the request
builder, the response mapper, and the orchestrator.

Security
--------
This module contains only generic sentinel strings. There are no credentials
or tokens embedded.

# pragma: allowlist secret
"""
from __future__ import annotations

# Header defaults
CONTENT_TYPE_HEADER = "Content-Type"
DEFAULT_CONTENT_TYPE = "application/json"

# Header names (lowercase) never forwarded through generic header passthrough.
# Credentials travel in the endpoint ``key`` parameter instead.
SENSITIVE_HEADERS = frozenset({"authorization"})

# Query parameter carrying the API key on Gemini endpoints
API_KEY_QUERY_PARAM = "key"  # pragma: allowlist secret - parameter name, not a secret

# Model version reported when the payload does not carry one
UNKNOWN_MODEL_VERSION = "unknown"

# Model version stamped on synthesized transport-failure responses
ERROR_FALLBACK_MODEL_VERSION = "gemini-flash-1.5"

# Synthesized transport-failure response values
ERROR_STATUS_CODE = 500
ERROR_FINISH_REASON = "ERROR"

# Standard HTTP verbs accepted by the default validator
HTTP_METHODS = ("GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS")

# Missing credential sentinel
MISSING_API_KEY_ERROR = "missing_api_key"  # pragma: allowlist secret - generic placeholder string, not a real secret

__all__ = [
    "CONTENT_TYPE_HEADER",
    "DEFAULT_CONTENT_TYPE",
    "SENSITIVE_HEADERS",
    "API_KEY_QUERY_PARAM",
    "UNKNOWN_MODEL_VERSION",
    "ERROR_FALLBACK_MODEL_VERSION",
    "ERROR_STATUS_CODE",
    "ERROR_FINISH_REASON",
    "HTTP_METHODS",
    "MISSING_API_KEY_ERROR",
]
