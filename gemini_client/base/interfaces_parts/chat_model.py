"""Model Protocol (single-class module)."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from .request import Request
from ..models import ChatResponse


@runtime_checkable
class Model(Protocol):
    """Single entry point of a chat model.

    Failure handling: raise only for validation failures; encode transport
    failures in the returned ``ChatResponse``.
    """

    def call(self, request: Request) -> ChatResponse: ...
