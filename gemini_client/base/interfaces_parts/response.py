"""Response Protocol (single-class module)."""

from __future__ import annotations

from typing import Mapping, Optional, Protocol, runtime_checkable

from ..models import ResponseBody


@runtime_checkable
class Response(Protocol):
    """Read-only view of a call outcome."""

    @property
    def status_code(self) -> int: ...

    @property
    def headers(self) -> Mapping[str, str]: ...

    @property
    def body(self) -> ResponseBody: ...

    @property
    def successful(self) -> bool: ...

    @property
    def error_message(self) -> Optional[str]: ...
