"""
RequestBody envelope: the ordered contents sent to ``generateContent``.
"""
from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Dict, Tuple

from .content import Content


@dataclass(frozen=True)
class RequestBody:
    """Ordered, immutable sequence of `Content` to send.

    Methods:
        from_text: Build a body with one single-part content per text.
        to_dict: Wire shape ``{"contents": [{"parts": [{"text": ...}]}]}``.
        to_json: Serialized wire shape.
    """

    contents: Tuple[Content, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "contents", tuple(self.contents))

    @classmethod
    def from_text(cls, *texts: str) -> "RequestBody":
        return cls(contents=tuple(Content.of_text(t) for t in texts))

    def to_dict(self) -> Dict[str, Any]:
        return {"contents": [c.to_dict() for c in self.contents]}

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False)


__all__ = ["RequestBody"]
