"""
Domain models (value objects) public surface.

Re-exports the one-class-per-file implementations under
``gemini_client.base.models_parts``.
"""

from .models_parts.part import Part, PromptDirection
from .models_parts.content import Content
from .models_parts.request_body import RequestBody
from .models_parts.candidate import Candidate
from .models_parts.response_body import ResponseBody, ResponseOutcome
from .models_parts.chat_request import ChatRequest
from .models_parts.chat_response import ChatResponse

__all__ = [
    "Part",
    "PromptDirection",
    "Content",
    "RequestBody",
    "Candidate",
    "ResponseBody",
    "ResponseOutcome",
    "ChatRequest",
    "ChatResponse",
]
