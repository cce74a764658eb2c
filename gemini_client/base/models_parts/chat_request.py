"""
ChatRequest: the concrete request handed to ``ChatModel.call``.

Credentials are never carried in headers. When ``api_key`` is set it is added
to the endpoint as the ``key`` query parameter; ``uri`` always stays
credential-free and is what gets logged.
"""
from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

import httpx

from ...config.defaults import (
    GEMINI_DEFAULT_BASE_URL,
    GEMINI_DEFAULT_METHOD,
    GEMINI_GENERATE_CONTENT_PATH,
)
from ..constants import API_KEY_QUERY_PARAM, SENSITIVE_HEADERS
from .request_body import RequestBody


@dataclass(frozen=True)
class ChatRequest:
    """Immutable chat request.

    Attributes:
        uri: Target URI without credentials.
        body: The `RequestBody` to serialize.
        method: HTTP method name (upper case).
        headers: Optional caller headers; ``None`` means none supplied.
        api_key: Optional API key, appended to the endpoint (never logged).
        model: Optional model identifier, informational (logging/CLI).

    Methods:
        endpoint: Absolute URL actually dispatched to.
        with_header / with_headers: Return a copy with extra headers.
        for_model: Build a ``generateContent`` request for a model.
        validate: Boolean check against the default validator.
        to_dict: Credential-free JSON-serializable view.
    """

    uri: str
    body: RequestBody
    method: str = GEMINI_DEFAULT_METHOD
    headers: Optional[Dict[str, str]] = None
    api_key: Optional[str] = field(default=None, repr=False)
    model: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "method", (self.method or "").upper())
        if self.headers is not None:
            object.__setattr__(self, "headers", dict(self.headers))

    @property
    def endpoint(self) -> str:
        if not self.api_key:
            return self.uri
        return str(httpx.URL(self.uri).copy_merge_params({API_KEY_QUERY_PARAM: self.api_key}))

    def with_header(self, name: str, value: str) -> "ChatRequest":
        return self.with_headers({name: value})

    def with_headers(self, headers: Mapping[str, str]) -> "ChatRequest":
        merged = dict(self.headers or {})
        merged.update(headers)
        return dataclasses.replace(self, headers=merged)

    @classmethod
    def for_model(
        cls,
        model: str,
        body: RequestBody,
        *,
        api_key: Optional[str] = None,
        base_url: str = GEMINI_DEFAULT_BASE_URL,
        method: str = GEMINI_DEFAULT_METHOD,
        headers: Optional[Mapping[str, str]] = None,
    ) -> "ChatRequest":
        """Build a request targeting ``{base_url}/models/{model}:generateContent``."""
        uri = base_url.rstrip("/") + GEMINI_GENERATE_CONTENT_PATH.format(model=model)
        return cls(
            uri=uri,
            body=body,
            method=method,
            headers=dict(headers) if headers is not None else None,
            api_key=api_key,
            model=model,
        )

    def validate(self) -> bool:
        """Return True when the default validator accepts this request."""
        # Local import: validation depends on the models package.
        from ..validation import DefaultRequestValidator
        from ..errors import RequestValidationError

        try:
            DefaultRequestValidator().validate(self)
        except RequestValidationError:
            return False
        return True

    def to_dict(self) -> Dict[str, Any]:
        return {
            "uri": self.uri,
            "method": self.method,
            "model": self.model,
            "headers": {
                k: v for k, v in (self.headers or {}).items() if k.lower() not in SENSITIVE_HEADERS
            },
            "has_api_key": bool(self.api_key),
            "body": self.body.to_dict(),
        }


__all__ = ["ChatRequest"]
