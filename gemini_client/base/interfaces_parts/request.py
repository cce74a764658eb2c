"""Request Protocol (single-class module)."""

from __future__ import annotations

from typing import Mapping, Optional, Protocol, runtime_checkable

from ..models import RequestBody


@runtime_checkable
class Request(Protocol):
    """Read-only view of an outbound request.

    ``uri`` is credential-free; ``endpoint`` is the absolute URL dispatched to.
    """

    @property
    def uri(self) -> str: ...

    @property
    def endpoint(self) -> str: ...

    @property
    def method(self) -> str: ...

    @property
    def headers(self) -> Optional[Mapping[str, str]]: ...

    @property
    def body(self) -> RequestBody: ...

    def validate(self) -> bool: ...
