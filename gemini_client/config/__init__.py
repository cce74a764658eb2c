"""Unified configuration layer for the client.

Merge order (later wins):
    1. Built-in defaults (``config.defaults``)
    2. External config file (JSON or YAML) pointed to by GEMINI_CLIENT_CONFIG_FILE
    3. Environment variables (GEMINI_MODEL, GEMINI_BASE_URL, GEMINI_API_KEY/GOOGLE_API_KEY)
    4. In-code overrides passed to ``get_client_config``

A ``.env`` file (path from DOTENV_FILE, default ``.env``) is loaded once before
the environment is read; it never overrides variables that are already set
to a real value.

External config file structure (a ``gemini`` section or top-level keys):

```
gemini:
  model: gemini-1.5-pro
  base_url: https://generativelanguage.googleapis.com/v1beta
```

Public API
----------
* get_client_config(overrides: dict | None = None) -> dict
* reset_config_cache() -> None
"""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .defaults import GEMINI_DEFAULT_BASE_URL, GEMINI_DEFAULT_MODEL
from .env import (
    BASE_URL_ENV,
    CONFIG_FILE_ENV,
    DOTENV_FILE_ENV,
    MODEL_ENV,
    is_placeholder,
    resolve_api_key,
)

DEFAULTS: Dict[str, Any] = {
    "model": GEMINI_DEFAULT_MODEL,
    "base_url": GEMINI_DEFAULT_BASE_URL,
}

_FILE_SECTION = "gemini"
_FILE_CACHE: Optional[Dict[str, Any]] = None
_DOTENV_LOADED = False


def _load_dotenv_once() -> None:
    """Parse KEY=VALUE lines from the dotenv file into ``os.environ``.

    Comments and blank lines are ignored. Existing variables are only
    replaced when they currently hold a placeholder value.
    """
    global _DOTENV_LOADED
    if _DOTENV_LOADED:
        return
    _DOTENV_LOADED = True
    path = os.getenv(DOTENV_FILE_ENV, ".env")
    if not os.path.isfile(path):
        return
    with open(path, "r", encoding="utf-8") as fh:
        for line in fh:
            line = line.strip()
            if not line or line.startswith("#") or "=" not in line:
                continue
            k, v = line.split("=", 1)
            k = k.strip()
            v = v.strip().strip('"').strip("'")
            if k and (k not in os.environ or is_placeholder(os.environ.get(k))):
                os.environ[k] = v


def _load_external_config() -> Dict[str, Any]:
    """Load and cache the external config file section (JSON first, then YAML)."""
    global _FILE_CACHE
    if _FILE_CACHE is not None:
        return _FILE_CACHE
    path = os.getenv(CONFIG_FILE_ENV)
    if not path or not Path(path).is_file():
        _FILE_CACHE = {}
        return _FILE_CACHE
    text = Path(path).read_text(encoding="utf-8")
    try:
        data = json.loads(text)
    except ValueError:
        data = yaml.safe_load(text) or {}
    if not isinstance(data, dict):
        data = {}
    section = data.get(_FILE_SECTION)
    if isinstance(section, dict):
        data = section
    _FILE_CACHE = {k: v for k, v in data.items() if k in ("model", "base_url", "api_key")}
    return _FILE_CACHE


def _env_overrides() -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    if model := os.getenv(MODEL_ENV):
        out["model"] = model.strip()
    if base_url := os.getenv(BASE_URL_ENV):
        out["base_url"] = base_url.strip()
    key, _source = resolve_api_key()
    if key:
        out["api_key"] = key
    return out


def get_client_config(overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Return the merged client configuration.

    Keys: ``model``, ``base_url`` and, when one is configured, ``api_key``.
    ``None`` values in ``overrides`` are ignored.
    """
    _load_dotenv_once()
    cfg: Dict[str, Any] = dict(DEFAULTS)
    cfg |= _load_external_config()
    cfg |= _env_overrides()
    if overrides:
        cfg |= {k: v for k, v in overrides.items() if v is not None}
    return cfg


def reset_config_cache() -> None:
    """Forget the cached config file and dotenv state (tests, reloads)."""
    global _FILE_CACHE, _DOTENV_LOADED
    _FILE_CACHE = None
    _DOTENV_LOADED = False


__all__ = [
    "DEFAULTS",
    "get_client_config",
    "reset_config_cache",
]
