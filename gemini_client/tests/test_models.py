"""Unit tests for the value objects in ``gemini_client.base.models``."""

from __future__ import annotations

import dataclasses
import json

import pytest

from gemini_client.base.models import (
    Candidate,
    ChatRequest,
    ChatResponse,
    Content,
    Part,
    RequestBody,
    ResponseBody,
    ResponseOutcome,
)


def test_part_directions():
    assert Part.request("hi").direction == "request"
    assert Part.response("hi").is_response
    assert Part.request("hi").to_dict() == {"text": "hi"}


def test_part_is_immutable():
    part = Part.request("hi")
    with pytest.raises(dataclasses.FrozenInstanceError):
        part.text = "changed"  # type: ignore[misc]


def test_content_coerces_parts_to_tuple():
    content = Content(parts=[Part.request("a"), Part.request("b")])  # type: ignore[arg-type]
    assert isinstance(content.parts, tuple)
    assert content.text == "ab"


def test_request_body_wire_shape():
    body = RequestBody.from_text("Hello")
    assert body.to_dict() == {"contents": [{"parts": [{"text": "Hello"}]}]}
    assert json.loads(body.to_json()) == body.to_dict()


def test_content_role_serialized_only_when_set():
    assert "role" not in Content.of_text("x").to_dict()
    assert Content.of_text("x", role="user").to_dict()["role"] == "user"


def test_for_model_builds_generate_content_uri():
    req = ChatRequest.for_model("gemini-1.5-pro", RequestBody.from_text("x"), api_key="secret")
    assert req.uri == "https://generativelanguage.googleapis.com/v1beta/models/gemini-1.5-pro:generateContent"
    assert req.method == "POST"
    assert req.model == "gemini-1.5-pro"


def test_endpoint_appends_key_but_uri_stays_clean():
    req = ChatRequest.for_model("m", RequestBody.from_text("x"), api_key="secret", base_url="https://api.test/v1/")
    assert req.uri == "https://api.test/v1/models/m:generateContent"
    assert req.endpoint == "https://api.test/v1/models/m:generateContent?key=secret"
    assert "secret" not in repr(req)
    assert "secret" not in json.dumps(req.to_dict())


def test_endpoint_without_key_is_uri():
    req = ChatRequest(uri="https://api.test/x", body=RequestBody.from_text("x"))
    assert req.endpoint == req.uri
    assert req.headers is None


def test_method_is_upper_cased():
    req = ChatRequest(uri="https://api.test/x", body=RequestBody.from_text("x"), method="post")
    assert req.method == "POST"


def test_with_header_returns_new_request():
    base = ChatRequest(uri="https://api.test/x", body=RequestBody.from_text("x"))
    extended = base.with_header("X-Trace", "1").with_header("Content-Type", "application/json")
    assert base.headers is None
    assert extended.headers == {"X-Trace": "1", "Content-Type": "application/json"}


def test_to_dict_hides_authorization_header():
    req = ChatRequest(
        uri="https://api.test/x",
        body=RequestBody.from_text("x"),
        headers={"Authorization": "Bearer X", "X-Custom": "Y"},
    )
    assert req.to_dict()["headers"] == {"X-Custom": "Y"}


def test_request_validate_boolean():
    good = ChatRequest.for_model("m", RequestBody.from_text("x"), api_key="k")
    bad = ChatRequest(uri="not a url", body=RequestBody())
    assert good.validate() is True
    assert bad.validate() is False


def test_response_body_defaults():
    body = ResponseBody()
    assert body.candidates == ()
    assert body.usage_metadata is None
    assert body.model_version == "unknown"
    assert body.text is None
    assert body.usage("promptTokenCount") is None


def test_response_body_none_candidates_become_empty():
    body = ResponseBody(candidates=None)  # type: ignore[arg-type]
    assert body.candidates == ()


def test_malformed_body_outcome():
    body = ResponseBody.malformed()
    assert body.outcome is ResponseOutcome.MALFORMED
    assert body.to_dict()["outcome"] == "malformed"


def test_candidate_text_concatenates_contents():
    cand = Candidate(contents=(Content.of_text("Hel", "response"), Content.of_text("lo", "response")))
    body = ResponseBody(candidates=(cand,), usage_metadata={"totalTokenCount": 4}, outcome=ResponseOutcome.PARSED)
    assert body.text == "Hello"
    assert body.usage("totalTokenCount") == 4


def test_chat_response_to_dict():
    resp = ChatResponse(status_code=200, body=ResponseBody(), headers={"a": "b"}, successful=True)
    data = resp.to_dict()
    assert data["status_code"] == 200
    assert data["successful"] is True
    assert data["error_code"] is None
    assert data["body"]["model_version"] == "unknown"


def test_chat_response_is_immutable():
    resp = ChatResponse(status_code=200, body=ResponseBody(), successful=True)
    with pytest.raises(dataclasses.FrozenInstanceError):
        resp.successful = False  # type: ignore[misc]
