"""Tests for the httpx transport adapter, the shared client pool and timeouts.

The adapter is exercised against ``httpx.MockTransport`` so requests never
leave the process.
"""

from __future__ import annotations

import json

import httpx
import pytest

from gemini_client.base.errors import ErrorCode, TransportError
from gemini_client.base.http import (
    HttpxTransport,
    TransportResponse,
    close_all_clients,
    get_httpx_client,
)
from gemini_client.base.interfaces import Transport
from gemini_client.base.timeouts import get_timeout_config
from gemini_client.gemini import ChatModel


def _client(handler) -> httpx.Client:
    return httpx.Client(transport=httpx.MockTransport(handler))


def test_exchange_sends_method_headers_and_body():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["method"] = request.method
        seen["url"] = str(request.url)
        seen["content_type"] = request.headers.get("content-type")
        seen["body"] = request.content.decode("utf-8")
        return httpx.Response(
            200,
            headers=[("set-cookie", "a=1"), ("set-cookie", "b=2"), ("x-request-id", "r1")],
            text='{"candidates": []}',
        )

    with _client(handler) as client:
        resp = HttpxTransport(client).exchange(
            "POST",
            "https://api.test/v1/models/m:generateContent?key=k",
            {"Content-Type": "application/json"},
            '{"contents": []}',
        )

    assert seen == {
        "method": "POST",
        "url": "https://api.test/v1/models/m:generateContent?key=k",
        "content_type": "application/json",
        "body": '{"contents": []}',
    }
    assert resp.status_code == 200
    assert resp.text == '{"candidates": []}'
    assert resp.headers["set-cookie"] == ["a=1", "b=2"]
    assert resp.first_headers()["set-cookie"] == "a=1"
    assert resp.first_headers()["x-request-id"] == "r1"


def test_error_status_is_returned_not_raised():
    with _client(lambda request: httpx.Response(500, text="boom")) as client:
        resp = HttpxTransport(client).exchange("POST", "https://api.test/x", {}, None)
    assert resp.status_code == 500
    assert resp.text == "boom"


def test_connect_error_becomes_transport_error_without_key():
    endpoint = "https://api.test/v1/models/m:generateContent?key=secret-k"

    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError(f"cannot reach {endpoint}", request=request)

    with _client(handler) as client:
        with pytest.raises(TransportError) as exc_info:
            HttpxTransport(client).exchange("POST", endpoint, {}, "{}")

    err = exc_info.value
    assert err.code is ErrorCode.UNAVAILABLE
    assert err.message.startswith("ConnectError: ")
    assert "secret-k" not in err.message
    assert isinstance(err.raw, httpx.ConnectError)


def test_timeout_is_classified():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("read timed out", request=request)

    with _client(handler) as client:
        with pytest.raises(TransportError) as exc_info:
            HttpxTransport(client).exchange("GET", "https://api.test/x", {}, None)
    assert exc_info.value.code is ErrorCode.TIMEOUT


@pytest.mark.parametrize(
    "headers, error_type",
    [
        ({"X-Custom": "café"}, "UnicodeEncodeError"),
        ({"X-Count": 1}, "TypeError"),
    ],
)
def test_request_build_errors_become_transport_errors(headers, error_type):
    endpoint = "https://api.test/v1/models/m:generateContent?key=secret-k"

    def handler(request: httpx.Request) -> httpx.Response:  # pragma: no cover - never reached
        return httpx.Response(200, text="{}")

    with _client(handler) as client:
        with pytest.raises(TransportError) as exc_info:
            HttpxTransport(client).exchange("POST", endpoint, headers, "{}")

    err = exc_info.value
    assert err.code is ErrorCode.VALIDATION
    assert err.retryable is False
    assert err.message.startswith(f"{error_type}: ")
    assert "secret-k" not in err.message


def test_invalid_url_becomes_transport_error():
    with _client(lambda request: httpx.Response(200)) as client:
        with pytest.raises(TransportError) as exc_info:
            HttpxTransport(client).exchange("POST", "https://api.test:notaport/models?key=secret-k", {}, "{}")
    assert exc_info.value.code is ErrorCode.VALIDATION
    assert "secret-k" not in exc_info.value.message


def test_chat_model_non_ascii_header_returns_error_response(gemini_request):
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, text="{}")

    request = gemini_request.with_header("X-Custom", "café")
    with _client(handler) as client:
        resp = ChatModel(transport=HttpxTransport(client)).call(request)

    assert seen == []
    assert resp.successful is False
    assert resp.status_code == 500
    assert resp.error_code is ErrorCode.VALIDATION
    assert resp.text.startswith("UnicodeEncodeError: ")
    assert "k-123" not in resp.text


def test_chat_model_end_to_end_over_mock_transport(gemini_request):
    payload = {
        "candidates": [{"content": {"parts": [{"text": "Sure!"}], "role": "model"}, "finishReason": "STOP"}],
        "usageMetadata": {"promptTokenCount": 6, "candidatesTokenCount": 2, "totalTokenCount": 8},
        "modelVersion": "gemini-1.5-flash-002",
    }
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["params"] = dict(request.url.params)
        seen["authorization"] = request.headers.get("authorization")
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json=payload)

    request = gemini_request.with_header("Authorization", "Bearer leaked")
    with _client(handler) as client:
        resp = ChatModel(transport=HttpxTransport(client)).call(request)

    assert seen["params"] == {"key": "k-123"}
    assert seen["authorization"] is None
    assert seen["body"] == {"contents": [{"parts": [{"text": "Hello, can you assist me?"}]}]}
    assert resp.successful
    assert resp.text == "Sure!"
    assert resp.body.usage("totalTokenCount") == 8


def test_chat_model_network_failure_over_mock_transport(gemini_request):
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with _client(handler) as client:
        resp = ChatModel(transport=HttpxTransport(client)).call(gemini_request)

    assert resp.successful is False
    assert resp.status_code == 500
    assert resp.text == "ConnectError: connection refused"
    assert resp.error_code is ErrorCode.UNAVAILABLE


def test_transport_satisfies_protocol():
    assert isinstance(HttpxTransport(), Transport)
    assert TransportResponse(status_code=204).first_headers() == {}


def test_pool_reuses_clients_per_purpose():
    close_all_clients()
    c1 = get_httpx_client("chat")
    c2 = get_httpx_client("chat")
    c3 = get_httpx_client("models")
    assert c1 is c2
    assert c1 is not c3
    assert HttpxTransport().client is c1


def test_pool_yields_new_client_when_timeouts_change(monkeypatch):
    c1 = get_httpx_client("chat")
    monkeypatch.setenv("GEMINI_CLIENT_HTTP_TIMEOUT_SECONDS", "5")
    c2 = get_httpx_client("chat")
    assert c1 is not c2
    assert c2.timeout.read == 5.0
    assert c1.is_closed
    assert get_httpx_client("chat") is c2


def test_close_all_clients_closes_pooled_clients():
    client = get_httpx_client("chat")
    close_all_clients()
    assert client.is_closed
    assert get_httpx_client("chat") is not client


def test_timeout_config_defaults_and_env(monkeypatch):
    cfg = get_timeout_config()
    assert (cfg.http_timeout_seconds, cfg.connect_timeout_seconds) == (30.0, 10.0)
    assert get_timeout_config() is cfg

    monkeypatch.setenv("GEMINI_CLIENT_HTTP_TIMEOUT_SECONDS", "12.5")
    monkeypatch.setenv("GEMINI_CLIENT_CONNECT_TIMEOUT_SECONDS", "2")
    cfg = get_timeout_config()
    assert (cfg.http_timeout_seconds, cfg.connect_timeout_seconds) == (12.5, 2.0)
    timeout = cfg.to_httpx()
    assert timeout.read == 12.5
    assert timeout.connect == 2.0


@pytest.mark.parametrize("raw", ["abc", "-1", "0"])
def test_timeout_config_ignores_invalid_values(monkeypatch, raw):
    monkeypatch.setenv("GEMINI_CLIENT_HTTP_TIMEOUT_SECONDS", raw)
    assert get_timeout_config().http_timeout_seconds == 30.0
