"""Outbound header construction."""
from __future__ import annotations

from typing import Dict, Mapping, Optional

from ..base.constants import CONTENT_TYPE_HEADER, DEFAULT_CONTENT_TYPE, SENSITIVE_HEADERS


def build_headers(headers: Optional[Mapping[str, str]]) -> Dict[str, str]:
    """Return the header set sent upstream.

    The result always carries a content type (``application/json`` unless the
    caller supplied one under any casing), then every caller header, minus
    ``Authorization``. Credentials travel in the endpoint, never through
    generic header passthrough.
    """
    supplied = dict(headers or {})
    out: Dict[str, str] = {}
    if not any(name.lower() == CONTENT_TYPE_HEADER.lower() for name in supplied):
        out[CONTENT_TYPE_HEADER] = DEFAULT_CONTENT_TYPE
    for name, value in supplied.items():
        if name.lower() in SENSITIVE_HEADERS:
            continue
        out[name] = value
    return out


__all__ = ["build_headers"]
