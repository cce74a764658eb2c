"""HTTP transport layer: pooled ``httpx`` clients and the transport adapter."""

from .client import get_httpx_client, close_all_clients
from .transport import HttpxTransport, TransportResponse

__all__ = ["get_httpx_client", "close_all_clients", "HttpxTransport", "TransportResponse"]
