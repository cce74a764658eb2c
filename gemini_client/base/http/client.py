"""Shared HTTP client pool.

Purpose:
    Provide a thread-safe cache of reusable ``httpx.Client`` instances so the
    default transport does not allocate a client (and connection pool) per
    call. Timeouts derive from :func:`get_timeout_config`.

Lifecycle & cleanup:
    - Clients are cached by ``purpose`` (e.g. "chat"); the timeout config in
      effect at creation time is part of the key, so changing the timeout
      environment yields a fresh client and closes the superseded one.
    - All clients are closed at interpreter exit via ``atexit``. Tests may
      call :func:`close_all_clients` explicitly.
"""

from __future__ import annotations

import atexit
import threading
from typing import Dict, Tuple

import httpx

from ..timeouts import TimeoutConfig, get_timeout_config

_CLIENTS: Dict[Tuple[str, TimeoutConfig], httpx.Client] = {}
_LOCK = threading.RLock()


def get_httpx_client(purpose: str = "chat") -> httpx.Client:
    """Return a pooled ``httpx.Client`` for the given purpose.

    Parameters:
        purpose: Short string discriminating separate pools. Keep stable to
            maximize reuse.

    Thread-safety:
        Safe for concurrent use; creation is guarded by a re-entrant lock.
    """
    cfg = get_timeout_config()
    key = (purpose, cfg)
    client = _CLIENTS.get(key)
    if client is not None:
        return client

    with _LOCK:
        client = _CLIENTS.get(key)
        if client is not None:
            return client
        # a timeout change supersedes older clients for this purpose
        for stale_key in [k for k in _CLIENTS if k[0] == purpose]:
            _CLIENTS.pop(stale_key).close()
        client = httpx.Client(timeout=cfg.to_httpx())
        _CLIENTS[key] = client
        return client


def close_all_clients() -> None:
    """Close and clear all pooled HTTP clients."""
    with _LOCK:
        for c in _CLIENTS.values():
            c.close()
        _CLIENTS.clear()


atexit.register(close_all_clients)

__all__ = ["get_httpx_client", "close_all_clients"]
