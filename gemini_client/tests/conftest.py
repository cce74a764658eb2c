"""Pytest configuration for the gemini_client test suite.

Provides a recording fake transport, a ready-made request, and an autouse
fixture isolating every test from the developer's environment (API keys,
config files, .env) and from pooled HTTP clients.
"""

from __future__ import annotations

import json
from typing import Any, Dict, Iterator, List, Mapping, Optional

import pytest

from gemini_client.base.http import TransportResponse, close_all_clients
from gemini_client.base.models import ChatRequest, RequestBody
from gemini_client.config import reset_config_cache

GEMINI_OK_PAYLOAD: Dict[str, Any] = {
    "candidates": [
        {
            "content": {"parts": [{"text": "Hello there"}], "role": "model"},
            "finishReason": "STOP",
            "avgLogprobs": -0.25,
        }
    ],
    "usageMetadata": {"promptTokenCount": 3, "candidatesTokenCount": 2, "totalTokenCount": 5},
    "modelVersion": "gemini-1.5-flash-002",
}

_ENV_VARS = (
    "GEMINI_API_KEY",
    "GOOGLE_API_KEY",
    "GEMINI_MODEL",
    "GEMINI_BASE_URL",
    "GEMINI_CLIENT_CONFIG_FILE",
    "GEMINI_CLIENT_LOG_LEVEL",
    "GEMINI_CLIENT_HTTP_TIMEOUT_SECONDS",
    "GEMINI_CLIENT_CONNECT_TIMEOUT_SECONDS",
)


class FakeTransport:
    """Transport double recording every exchange.

    Returns ``response`` (a 200 with ``GEMINI_OK_PAYLOAD`` by default) or
    raises ``error`` when set.
    """

    def __init__(
        self,
        response: Optional[TransportResponse] = None,
        error: Optional[BaseException] = None,
    ) -> None:
        self.response = response or TransportResponse(
            status_code=200,
            headers={"content-type": ["application/json; charset=UTF-8"]},
            text=json.dumps(GEMINI_OK_PAYLOAD),
        )
        self.error = error
        self.calls: List[Dict[str, Any]] = []

    def exchange(
        self,
        method: str,
        endpoint: str,
        headers: Mapping[str, str],
        body: Optional[str],
    ) -> TransportResponse:
        self.calls.append({"method": method, "endpoint": endpoint, "headers": dict(headers), "body": body})
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> Iterator[None]:
    """Clear client env vars and caches so tests never see real credentials."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("DOTENV_FILE", str(tmp_path / "missing.env"))
    reset_config_cache()
    yield
    reset_config_cache()
    close_all_clients()


@pytest.fixture()
def fake_transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture()
def make_transport():
    """Factory for transports returning a custom response or raising an error."""
    return FakeTransport


@pytest.fixture()
def gemini_request() -> ChatRequest:
    """A valid single-turn request carrying an API key."""
    return ChatRequest.for_model(
        "gemini-1.5-flash",
        RequestBody.from_text("Hello, can you assist me?"),
        api_key="k-123",
    )
