"""Map raw ``generateContent`` JSON into :class:`ResponseBody`.

Every function here is exception-safe: malformed or unexpected payloads
degrade to default values and are logged, never raised.

Consumed shape (all fields optional)::

    {
      "candidates": [
        {"content": {"parts": [{"text": "..."}]},
         "finishReason": "STOP", "avgLogprobs": -0.12}
      ],
      "usageMetadata": {"promptTokenCount": 5, ...},
      "model": "...",            # or "modelVersion"
    }
"""
from __future__ import annotations

import json
import logging
from typing import Any, Dict, List, Optional

from ..base.constants import UNKNOWN_MODEL_VERSION
from ..base.logging import get_logger, log_event
from ..base.models import Candidate, Content, Part, ResponseBody, ResponseOutcome

_MODEL_VERSION_KEYS = ("model", "modelVersion")

_logger = get_logger("gemini.mapping")


def _parse_contents(content_node: Any) -> List[Content]:
    """One single-part response `Content` per non-empty text part."""
    contents: List[Content] = []
    if not isinstance(content_node, dict):
        return contents
    parts = content_node.get("parts")
    if not isinstance(parts, list):
        return contents
    for part_node in parts:
        text = part_node.get("text", "") if isinstance(part_node, dict) else ""
        if isinstance(text, str) and text:
            contents.append(Content(parts=(Part.response(text),)))
    return contents


def _parse_candidate(node: Any) -> Candidate:
    if not isinstance(node, dict):
        return Candidate()
    finish_reason = node.get("finishReason")
    avg_logprobs = node.get("avgLogprobs")
    return Candidate(
        contents=tuple(_parse_contents(node.get("content"))),
        finish_reason=finish_reason if isinstance(finish_reason, str) else None,
        avg_logprobs=(
            float(avg_logprobs)
            if isinstance(avg_logprobs, (int, float)) and not isinstance(avg_logprobs, bool)
            else None
        ),
    )


def _parse_usage(node: Any) -> Optional[Dict[str, int]]:
    """Integer-valued fields only; floats and booleans are skipped."""
    if not isinstance(node, dict):
        return None
    return {
        str(key): value
        for key, value in node.items()
        if isinstance(value, int) and not isinstance(value, bool)
    }


def _parse_model_version(root: Dict[str, Any]) -> str:
    for key in _MODEL_VERSION_KEYS:
        value = root.get(key)
        if isinstance(value, str):
            return value
    return UNKNOWN_MODEL_VERSION


def map_response_body(text: Optional[str]) -> ResponseBody:
    """Map raw response text into a :class:`ResponseBody`. Never raises.

    - Unparseable text or a non-object root yields an empty body with outcome
      ``malformed``.
    - Each ``candidates`` element yields one `Candidate`, even when it has no
      content or parts.
    - ``usageMetadata`` keeps integer fields only; absent means ``None``.
    - Model version comes from ``model`` then ``modelVersion``, else
      ``"unknown"``.
    """
    try:
        root = json.loads(text) if text else None
    except (ValueError, TypeError, RecursionError) as e:
        log_event(_logger, "response.parse_error", level=logging.ERROR, error=str(e), length=len(text or ""))
        return ResponseBody.malformed()
    if not isinstance(root, dict):
        log_event(
            _logger,
            "response.parse_error",
            level=logging.ERROR,
            error="response body is not a JSON object",
            length=len(text or ""),
        )
        return ResponseBody.malformed()

    try:
        raw_candidates = root.get("candidates")
        candidates = (
            [_parse_candidate(c) for c in raw_candidates] if isinstance(raw_candidates, list) else []
        )
        return ResponseBody(
            candidates=tuple(candidates),
            usage_metadata=_parse_usage(root.get("usageMetadata")),
            model_version=_parse_model_version(root),
            outcome=ResponseOutcome.PARSED if candidates else ResponseOutcome.EMPTY,
        )
    except Exception as e:  # noqa: BLE001 - the mapper must not raise
        log_event(_logger, "response.map_error", level=logging.ERROR, error=f"{type(e).__name__}: {e}")
        return ResponseBody.malformed()


def extract_error_message(text: Optional[str]) -> Optional[str]:
    """Return ``error.message`` from a Gemini error envelope, if any. Never raises."""
    if not text:
        return None
    try:
        root = json.loads(text)
    except (ValueError, TypeError, RecursionError):
        return None
    error = root.get("error") if isinstance(root, dict) else None
    if isinstance(error, dict) and isinstance(error.get("message"), str):
        return error["message"]
    return None


__all__ = ["map_response_body", "extract_error_message"]
