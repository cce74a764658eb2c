"""gemini_client.config.env
========================

Environment variable names and helpers for the Gemini API key.

Design Notes
------------
- The key has historically been read from both ``GEMINI_API_KEY`` and
  ``GOOGLE_API_KEY``; ``API_KEY_ENV_CANDIDATES`` lists them in priority order
  with the canonical name first.
- Placeholder values (``changeme``, ``your-key-here`` ...) are treated as
  unset so a template ``.env`` never produces a real-looking request.
- Helpers never raise on unset variables; callers decide how to proceed.
"""

from __future__ import annotations

import os
from typing import Optional, Tuple

API_KEY_ENV = "GEMINI_API_KEY"  # pragma: allowlist secret - env var name, not a secret
API_KEY_ENV_CANDIDATES: Tuple[str, ...] = ("GEMINI_API_KEY", "GOOGLE_API_KEY")
MODEL_ENV = "GEMINI_MODEL"
BASE_URL_ENV = "GEMINI_BASE_URL"
CONFIG_FILE_ENV = "GEMINI_CLIENT_CONFIG_FILE"
DOTENV_FILE_ENV = "DOTENV_FILE"


def is_placeholder(val: Optional[str]) -> bool:
    """Return True if the value looks like a placeholder/test value.

    Heuristics (case-insensitive): contains 'placeholder', 'changeme',
    'example' or 'your-key', or starts with 'test_'.
    """
    if val is None:
        return False
    v = str(val).strip().lower()
    return (
        "placeholder" in v
        or "changeme" in v
        or "example" in v
        or "your-key" in v
        or v.startswith("test_")
    )


def resolve_api_key() -> Tuple[Optional[str], Optional[str]]:
    """Resolve the API key from the process environment.

    Returns
    -------
    Tuple[Optional[str], Optional[str]]
        ``(value, env_var_used)`` for the first non-empty, non-placeholder
        candidate; ``(None, None)`` when nothing usable is set.
    """
    for name in API_KEY_ENV_CANDIDATES:
        val = os.environ.get(name)
        if val and not is_placeholder(val):
            return val.strip(), name
    return None, None


__all__ = [
    "API_KEY_ENV",
    "API_KEY_ENV_CANDIDATES",
    "MODEL_ENV",
    "BASE_URL_ENV",
    "CONFIG_FILE_ENV",
    "DOTENV_FILE_ENV",
    "is_placeholder",
    "resolve_api_key",
]
