"""Default transport adapter built on ``httpx``.

The orchestrator never talks to ``httpx`` directly: it hands method, endpoint,
headers and the serialized body to a transport and receives a
:class:`TransportResponse`. Connection-level failures surface as
:class:`TransportError`; non-2xx statuses are returned, not raised.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional

import httpx

from ..errors import ErrorCode, TransportError, classify_exception
from .client import get_httpx_client


@dataclass(frozen=True)
class TransportResponse:
    """Raw result of one HTTP exchange.

    Attributes:
        status_code: HTTP status code.
        headers: Header multimap (name -> values in received order).
        text: Raw response body text; may be empty.
    """

    status_code: int
    headers: Dict[str, List[str]] = field(default_factory=dict)
    text: str = ""

    def first_headers(self) -> Dict[str, str]:
        """Collapse the multimap to the first value per header name."""
        return {name: (values[0] if values else "") for name, values in self.headers.items()}


def _scrub(exc: Exception, endpoint: str) -> str:
    """Error text with the endpoint (and its key) replaced by ``<endpoint>``."""
    return f"{type(exc).__name__}: {exc}".replace(endpoint, "<endpoint>")


def _multimap(headers: httpx.Headers) -> Dict[str, List[str]]:
    out: Dict[str, List[str]] = {}
    for name, value in headers.multi_items():
        out.setdefault(name, []).append(value)
    return out


class HttpxTransport:
    """Transport performing the exchange with a (pooled) ``httpx.Client``.

    Pass ``client`` to use a specific client (custom proxies, mounts, or an
    ``httpx.MockTransport`` in tests); otherwise the shared pool is used.
    """

    def __init__(self, client: Optional[httpx.Client] = None, *, purpose: str = "chat") -> None:
        self._client = client
        self._purpose = purpose

    @property
    def client(self) -> httpx.Client:
        return self._client if self._client is not None else get_httpx_client(self._purpose)

    def exchange(
        self,
        method: str,
        endpoint: str,
        headers: Mapping[str, str],
        body: Optional[str],
    ) -> TransportResponse:
        """Perform one HTTP exchange.

        Raises:
            TransportError: when the request cannot be built (invalid URL or
                headers) or completed (DNS, connect, timeout, protocol errors).
        """
        try:
            resp = self.client.request(method, endpoint, headers=dict(headers), content=body)
        except httpx.HTTPError as e:
            raise TransportError(code=classify_exception(e), message=_scrub(e, endpoint), raw=e) from e
        except (httpx.InvalidURL, ValueError, TypeError) as e:
            # httpx could not build the request (bad URL, non-ASCII or non-str header)
            raise TransportError(
                code=ErrorCode.VALIDATION,
                message=_scrub(e, endpoint),
                retryable=False,
                raw=e,
            ) from e
        return TransportResponse(
            status_code=resp.status_code,
            headers=_multimap(resp.headers),
            text=resp.text,
        )


__all__ = ["HttpxTransport", "TransportResponse"]
