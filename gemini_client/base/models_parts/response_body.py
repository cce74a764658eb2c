"""
ResponseBody envelope produced by the response mapper.

``candidates`` is never ``None``. ``usage_metadata`` is ``None`` when the
upstream service did not return it. ``outcome`` tells an empty upstream
result apart from input that could not be mapped at all.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from ..constants import UNKNOWN_MODEL_VERSION
from .candidate import Candidate


class ResponseOutcome(str, Enum):
    """How a response body came to be."""

    PARSED = "parsed"        # at least one candidate mapped
    EMPTY = "empty"          # well-formed payload without candidates
    MALFORMED = "malformed"  # unparseable or unmappable payload


@dataclass(frozen=True)
class ResponseBody:
    """Mapped response payload.

    Attributes:
        candidates: Generated alternatives in upstream order.
        usage_metadata: Metric name -> integer count (e.g. ``promptTokenCount``).
        model_version: Reported model version, ``"unknown"`` when absent.
        outcome: See :class:`ResponseOutcome`.
    """

    candidates: Tuple[Candidate, ...] = ()
    usage_metadata: Optional[Dict[str, int]] = None
    model_version: str = UNKNOWN_MODEL_VERSION
    outcome: ResponseOutcome = ResponseOutcome.EMPTY

    def __post_init__(self) -> None:
        object.__setattr__(self, "candidates", tuple(self.candidates or ()))
        if self.usage_metadata is not None:
            object.__setattr__(self, "usage_metadata", dict(self.usage_metadata))

    @classmethod
    def malformed(cls) -> "ResponseBody":
        """Default body used when the payload cannot be mapped."""
        return cls(outcome=ResponseOutcome.MALFORMED)

    @property
    def text(self) -> Optional[str]:
        """Text of the first candidate, or ``None`` when there is none."""
        return self.candidates[0].text if self.candidates else None

    def usage(self, metric: str) -> Optional[int]:
        """Return one usage counter, ``None`` when absent."""
        return (self.usage_metadata or {}).get(metric)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "candidates": [c.to_dict() for c in self.candidates],
            "usage_metadata": self.usage_metadata,
            "model_version": self.model_version,
            "outcome": self.outcome.value,
        }


__all__ = ["ResponseBody", "ResponseOutcome"]
