"""Gemini chat model: orchestrator, header builder and response mapper."""

from .client import ChatModel, error_response, to_chat_response
from .headers import build_headers
from .mapping import extract_error_message, map_response_body

__all__ = [
    "ChatModel",
    "error_response",
    "to_chat_response",
    "build_headers",
    "extract_error_message",
    "map_response_body",
]
