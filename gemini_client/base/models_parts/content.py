"""
Content model: one conversation turn made of ordered parts.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, Optional, Tuple

from .part import Part, PromptDirection


@dataclass(frozen=True)
class Content:
    """An ordered, immutable sequence of `Part` objects.

    Attributes:
        parts: The parts of this turn, in order.
        role: Optional author role (``"user"`` or ``"model"``). Omitted from
            the wire shape when unset.
    """

    parts: Tuple[Part, ...] = ()
    role: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "parts", tuple(self.parts))

    @classmethod
    def of_text(
        cls,
        text: str,
        direction: PromptDirection = "request",
        role: Optional[str] = None,
    ) -> "Content":
        """Build a single-part content from plain text."""
        return cls(parts=(Part(text=text, direction=direction),), role=role)

    @classmethod
    def of_parts(cls, parts: Iterable[Part], role: Optional[str] = None) -> "Content":
        return cls(parts=tuple(parts), role=role)

    @property
    def text(self) -> str:
        """Concatenated text of all parts."""
        return "".join(p.text for p in self.parts)

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"parts": [p.to_dict() for p in self.parts]}
        if self.role:
            out["role"] = self.role
        return out


__all__ = ["Content"]
