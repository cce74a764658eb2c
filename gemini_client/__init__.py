"""gemini_client package

Thin client for the Gemini ``generateContent`` HTTP API: builds a request
from structured prompts, sends it through a pluggable transport, and maps the
JSON response into typed objects.

Public API (re-exported):
    - Version: ``__version__``
    - Orchestrator: :class:`ChatModel`
    - Models: :class:`Part`, :class:`Content`, :class:`RequestBody`,
      :class:`ChatRequest`, :class:`ChatResponse`, :class:`Candidate`,
      :class:`ResponseBody`, :class:`ResponseOutcome`
    - Validation: :class:`DefaultRequestValidator`, :class:`CallableValidator`,
      :class:`CompositeValidator`
    - Transport: :class:`HttpxTransport`, :class:`TransportResponse`
    - Errors: :class:`ClientError`, :class:`RequestValidationError`,
      :class:`TransportError`, :class:`ErrorCode`
    - Helpers: :func:`simple`, :func:`build_headers`, :func:`map_response_body`
"""

from .base.errors import ClientError, ErrorCode, RequestValidationError, TransportError
from .base.http import HttpxTransport, TransportResponse
from .base.models import (
    Candidate,
    ChatRequest,
    ChatResponse,
    Content,
    Part,
    RequestBody,
    ResponseBody,
    ResponseOutcome,
)
from .base.utils import simple
from .base.validation import CallableValidator, CompositeValidator, DefaultRequestValidator
from .gemini import ChatModel, build_headers, map_response_body

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "ChatModel",
    "Part",
    "Content",
    "RequestBody",
    "ChatRequest",
    "ChatResponse",
    "Candidate",
    "ResponseBody",
    "ResponseOutcome",
    "DefaultRequestValidator",
    "CallableValidator",
    "CompositeValidator",
    "HttpxTransport",
    "TransportResponse",
    "ClientError",
    "RequestValidationError",
    "TransportError",
    "ErrorCode",
    "simple",
    "build_headers",
    "map_response_body",
]
