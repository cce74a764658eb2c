"""
Candidate model: one generated alternative in a response.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from .content import Content


@dataclass(frozen=True)
class Candidate:
    """A single generated alternative.

    Attributes:
        contents: Ordered contents mapped from the candidate's parts. Empty
            when the upstream candidate carried no content/parts.
        finish_reason: Upstream ``finishReason`` when present (``"ERROR"`` on
            synthesized transport-failure responses).
        avg_logprobs: Upstream ``avgLogprobs`` when present.
    """

    contents: Tuple[Content, ...] = ()
    finish_reason: Optional[str] = None
    avg_logprobs: Optional[float] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "contents", tuple(self.contents))

    @property
    def text(self) -> str:
        """Concatenated text of all contents, in order."""
        return "".join(c.text for c in self.contents)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "contents": [c.to_dict() for c in self.contents],
            "finish_reason": self.finish_reason,
            "avg_logprobs": self.avg_logprobs,
        }


__all__ = ["Candidate"]
