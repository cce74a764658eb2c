"""ChatModel: the Gemini request/response orchestrator.

Call path (linear):
    1. Validate the request; ``RequestValidationError`` propagates and no
       network call is made.
    2. Build outbound headers (content type defaulted, ``Authorization`` stripped).
    3. Dispatch through the transport with the JSON-serialized body.
    4. Map the raw body into a ``ResponseBody``.
    5. Wrap everything into a ``ChatResponse``.

Nothing that fails after validation escapes ``call``: the failure is logged
and converted into a synthesized error response (``successful=False``, status 500, one candidate
carrying the failure message).
"""

from __future__ import annotations

import logging
import time
import uuid
from typing import Optional

import httpx

from ..base.constants import (
    ERROR_FALLBACK_MODEL_VERSION,
    ERROR_FINISH_REASON,
    ERROR_STATUS_CODE,
)
from ..base.errors import (
    ClientError,
    ErrorCode,
    RequestValidationError,
    TransportError,
    classify_exception,
    classify_status,
)
from ..base.http import HttpxTransport, TransportResponse
from ..base.interfaces import Model, Request, Transport, Validator
from ..base.logging import LogContext, get_logger, log_event
from ..base.models import Candidate, ChatResponse, Content, Part, ResponseBody, ResponseOutcome
from ..base.validation import DefaultRequestValidator
from .headers import build_headers
from .mapping import extract_error_message, map_response_body

# Expected exchange failures; anything else is also absorbed but logged with a traceback.
TRANSPORT_FAILURES = (TransportError, httpx.HTTPError, OSError)


def _error_text(exc: BaseException) -> str:
    if isinstance(exc, ClientError):
        return exc.message
    return str(exc) or type(exc).__name__


def error_response(exc: BaseException, code: Optional[ErrorCode] = None) -> ChatResponse:
    """Synthesize the response returned when a call fails after validation.

    The single candidate's content carries the failure text; usage metadata is
    ``None`` and the model version is the fixed fallback identifier.
    """
    message = _error_text(exc)
    candidate = Candidate(
        contents=(Content(parts=(Part.response(message),)),),
        finish_reason=ERROR_FINISH_REASON,
        avg_logprobs=0.0,
    )
    body = ResponseBody(
        candidates=(candidate,),
        usage_metadata=None,
        model_version=ERROR_FALLBACK_MODEL_VERSION,
        outcome=ResponseOutcome.PARSED,
    )
    return ChatResponse(
        status_code=ERROR_STATUS_CODE,
        body=body,
        headers={},
        successful=False,
        error_message=message,
        error_code=code,
    )


def to_chat_response(resp: TransportResponse) -> ChatResponse:
    """Wrap a completed exchange; non-2xx statuses carry an error message and code."""
    successful = 200 <= resp.status_code < 300
    error_message = None
    if not successful:
        error_message = extract_error_message(resp.text) or f"HTTP {resp.status_code}"
    return ChatResponse(
        status_code=resp.status_code,
        body=map_response_body(resp.text),
        headers=resp.first_headers(),
        successful=successful,
        error_message=error_message,
        error_code=classify_status(resp.status_code),
    )


class ChatModel(Model):
    """Gemini chat model bound to a transport and a validator.

    Both collaborators are shared across calls and must be safe for
    concurrent use; all per-call state is local to ``call``.
    """

    def __init__(
        self,
        transport: Optional[Transport] = None,
        validator: Optional[Validator] = None,
    ) -> None:
        """Initialize the model.

        Args:
            transport: Performs the HTTP exchange. Defaults to
                :class:`HttpxTransport` on the shared client pool.
            validator: Pre-dispatch check. Defaults to
                :class:`DefaultRequestValidator`.
        """
        self._transport = transport if transport is not None else HttpxTransport()
        self._validator = validator if validator is not None else DefaultRequestValidator()
        self._logger = get_logger("gemini.chat")

    @property
    def provider_name(self) -> str:
        return "gemini"

    def call(self, request: Request) -> ChatResponse:
        """Validate, dispatch, and map one request.

        Raises:
            RequestValidationError: when the validator rejects the request.
        """
        ctx = LogContext(
            provider=self.provider_name,
            model=getattr(request, "model", None),
            request_id=uuid.uuid4().hex,
            method=getattr(request, "method", None),
            uri=getattr(request, "uri", None),
        )
        try:
            self._validator.validate(request)
        except RequestValidationError as e:
            log_event(self._logger, "request.invalid", ctx, level=logging.WARNING, error=e.message)
            raise

        log_event(self._logger, "chat.start", ctx)
        t0 = time.perf_counter()
        try:
            resp = self._transport.exchange(
                request.method,
                request.endpoint,
                build_headers(request.headers),
                request.body.to_json(),
            )
            response = to_chat_response(resp)
        except Exception as e:  # noqa: BLE001 - failures after validation become error responses
            code = classify_exception(e)
            log_event(
                self._logger,
                "chat.error",
                ctx,
                level=logging.ERROR,
                error=_error_text(e),
                error_type=type(e).__name__,
                error_code=code.value,
                latency_ms=round((time.perf_counter() - t0) * 1000.0, 3),
                exc_info=not isinstance(e, TRANSPORT_FAILURES),
            )
            return error_response(e, code)

        log_event(
            self._logger,
            "chat.end",
            ctx,
            level=logging.INFO if response.successful else logging.WARNING,
            status=response.status_code,
            successful=response.successful,
            candidates=len(response.body.candidates),
            outcome=response.body.outcome.value,
            error_code=response.error_code.value if response.error_code else None,
            latency_ms=round((time.perf_counter() - t0) * 1000.0, 3),
        )
        return response


__all__ = ["ChatModel", "error_response", "to_chat_response", "TRANSPORT_FAILURES"]
