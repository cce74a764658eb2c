"""Convenience helper for one-shot prompts.

Sends a plain text prompt without manually constructing a ``ChatRequest``;
model, base URL and API key come from :func:`get_client_config`.
"""
from __future__ import annotations

from typing import Optional

from ...config import get_client_config
from ..constants import MISSING_API_KEY_ERROR
from ..errors import RequestValidationError
from ..interfaces import Model
from ..models import ChatRequest, ChatResponse, Content, RequestBody


def build_simple_request(
    text: str,
    *,
    model: Optional[str] = None,
    api_key: Optional[str] = None,
    base_url: Optional[str] = None,
) -> ChatRequest:
    """Build a single-turn ``user`` request from configuration.

    Raises
    - RequestValidationError: when no API key is configured.
    """
    cfg = get_client_config({"model": model, "api_key": api_key, "base_url": base_url})
    if not cfg.get("api_key"):
        raise RequestValidationError(message=MISSING_API_KEY_ERROR, model=cfg.get("model"))
    body = RequestBody(contents=(Content.of_text(text, role="user"),))
    return ChatRequest.for_model(
        cfg["model"],
        body,
        api_key=cfg["api_key"],
        base_url=cfg["base_url"],
    )


def simple(
    text: str,
    *,
    model: Optional[str] = None,
    api_key: Optional[str] = None,
    base_url: Optional[str] = None,
    chat_model: Optional[Model] = None,
) -> ChatResponse:
    """Send a plain text prompt with minimal ceremony.

    Parameters
    - text: Prompt text sent as a single user turn.
    - model / api_key / base_url: Override the configured values.
    - chat_model: Model to call; defaults to a new ``ChatModel`` on the
      shared HTTP pool.

    Returns
    - ChatResponse: transport failures are encoded in the response.

    Raises
    - RequestValidationError: when no API key is configured or the request
      is rejected by the validator.
    """
    request = build_simple_request(text, model=model, api_key=api_key, base_url=base_url)
    if chat_model is None:
        # Local import: the gemini package depends on base.
        from ...gemini import ChatModel

        chat_model = ChatModel()
    return chat_model.call(request)


__all__ = ["simple", "build_simple_request"]
