"""Models parts package public surface.

`gemini_client.base.models` remains the primary stable import path.
"""

from .part import Part, PromptDirection
from .content import Content
from .request_body import RequestBody
from .candidate import Candidate
from .response_body import ResponseBody, ResponseOutcome
from .chat_request import ChatRequest
from .chat_response import ChatResponse

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
