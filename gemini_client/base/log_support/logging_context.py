"""Structured logging context object.

:class:`LogContext` carries the common fields of client logging events
(provider, model, request id, HTTP method, credential-free URI).
"""
from __future__ import annotations

from dataclasses import dataclass, asdict, field
from typing import Any, Dict, Optional


@dataclass
class LogContext:
    """Structured context for client logging events."""

    provider: Optional[str] = None
    model: Optional[str] = None
    request_id: Optional[str] = None
    method: Optional[str] = None
    uri: Optional[str] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        extra = data.pop("extra", {}) or {}
        data.update({k: v for k, v in extra.items() if v is not None})
        return {k: v for k, v in data.items() if v is not None}


__all__ = ["LogContext"]
