"""gemini_client.config.defaults
=============================

Small, stable default values used across the package. They can be overridden
via environment variables, an external config file, or explicit overrides
(see :func:`gemini_client.config.get_client_config`).

This module imports nothing from the rest of the package to prevent circular
dependencies. Only plain constants live here.
"""

from __future__ import annotations

# ---- Gemini endpoint ----
GEMINI_DEFAULT_MODEL = "gemini-1.5-flash"
GEMINI_DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"
# Appended to the base URL; ``{model}`` is substituted.
GEMINI_GENERATE_CONTENT_PATH = "/models/{model}:generateContent"
GEMINI_DEFAULT_METHOD = "POST"

# ---- CLI ----
CLI_PROGRAM_NAME = "gemini-client"


__all__ = [
    "GEMINI_DEFAULT_MODEL",
    "GEMINI_DEFAULT_BASE_URL",
    "GEMINI_GENERATE_CONTENT_PATH",
    "GEMINI_DEFAULT_METHOD",
    "CLI_PROGRAM_NAME",
]
