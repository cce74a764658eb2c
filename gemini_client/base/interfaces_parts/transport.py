"""Transport Protocol (single-class module)."""

from __future__ import annotations

from typing import Mapping, Optional, Protocol, runtime_checkable

from ..http.transport import TransportResponse


@runtime_checkable
class Transport(Protocol):
    """Performs one HTTP exchange.

    Network-level failures are raised as
    :class:`~gemini_client.base.errors.TransportError`; HTTP error statuses
    are returned in the :class:`TransportResponse`.
    """

    def exchange(
        self,
        method: str,
        endpoint: str,
        headers: Mapping[str, str],
        body: Optional[str],
    ) -> TransportResponse: ...
