"""
Pydantic DTOs describing a structurally valid outbound request.

Purpose
-------
The default validator projects a request into these models before dispatch.
They enforce the HTTP method, an absolute http(s) endpoint, string headers,
and a non-empty body of non-empty contents and parts.

External dependencies: Pydantic only (no network calls).

Validation either succeeds or raises ``pydantic.ValidationError``; the
validator layer converts that into ``RequestValidationError``.
"""

from __future__ import annotations

from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, Field, HttpUrl, field_validator


HttpMethod = Literal["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"]


class PartDTO(BaseModel):
    """A single text part; the text must contain a non-whitespace character."""

    text: str

    @field_validator("text")
    @classmethod
    def _non_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("part text must be non-empty")
        return value


class ContentDTO(BaseModel):
    """One turn: at least one part and an optional known role."""

    parts: List[PartDTO] = Field(..., min_length=1)
    role: Optional[Literal["user", "model"]] = None


class RequestBodyDTO(BaseModel):
    """Body envelope: at least one content."""

    contents: List[ContentDTO] = Field(..., min_length=1)


class RequestDTO(BaseModel):
    """Full outbound request shape.

    Parameters:
        method: Standard HTTP verb (upper case).
        endpoint: Absolute http(s) URL.
        headers: Header names and values, both strings.
        body: The serialized request body.

    Raises:
        ValidationError: on unknown verbs, relative or non-http URLs, non-string
            headers, or empty contents/parts.
    """

    method: HttpMethod
    endpoint: HttpUrl
    headers: Dict[str, str] = Field(default_factory=dict)
    body: RequestBodyDTO


__all__ = ["PartDTO", "ContentDTO", "RequestBodyDTO", "RequestDTO", "HttpMethod"]
