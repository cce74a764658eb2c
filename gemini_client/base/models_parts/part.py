"""
Prompt fragment model.

A `Part` is the smallest unit of prompt/response text. Its ``direction``
records whether the text is outbound (a request prompt written by the caller)
or inbound (a response prompt produced by the model).
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Literal


PromptDirection = Literal["request", "response"]


@dataclass(frozen=True)
class Part:
    """A single immutable prompt fragment.

    Attributes:
        text: The fragment text.
        direction: ``"request"`` for outbound prompts, ``"response"`` for
            text mapped from an upstream payload.
    """

    text: str
    direction: PromptDirection = "request"

    @classmethod
    def request(cls, text: str) -> "Part":
        """Build an outbound (request-direction) part."""
        return cls(text=text, direction="request")

    @classmethod
    def response(cls, text: str) -> "Part":
        """Build an inbound (response-direction) part."""
        return cls(text=text, direction="response")

    @property
    def is_response(self) -> bool:
        return self.direction == "response"

    def to_dict(self) -> Dict[str, Any]:
        """Return the wire shape ``{"text": ...}``."""
        return {"text": self.text}


__all__ = ["Part", "PromptDirection"]
