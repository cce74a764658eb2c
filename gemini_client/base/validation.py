"""Request validators run by ``ChatModel.call`` before any network I/O.

Any object with ``validate(request) -> None`` that raises
:class:`RequestValidationError` on failure can be plugged in. The built-ins:

- :class:`DefaultRequestValidator`: structural checks via pydantic DTOs.
- :class:`CallableValidator`: wraps a boolean predicate.
- :class:`CompositeValidator`: runs several validators in order.
"""
from __future__ import annotations

from typing import Any, Callable, Dict, Iterable, Tuple

from pydantic import ValidationError

from .dto import RequestDTO
from .errors import RequestValidationError
from .interfaces import Request, Validator


def _summarize(exc: ValidationError) -> str:
    """Compact ``loc: msg`` summary. Input values are left out because the
    endpoint may carry an API key."""
    return "; ".join(
        f"{'.'.join(str(p) for p in err['loc']) or 'request'}: {err['msg']}" for err in exc.errors()
    )


def _project(request: Request) -> Dict[str, Any]:
    body = request.body
    return {
        "method": request.method,
        "endpoint": request.endpoint,
        "headers": dict(request.headers or {}),
        "body": body.to_dict() if body is not None else None,
    }


class DefaultRequestValidator:
    """Structural request validator backed by :class:`RequestDTO`."""

    def validate(self, request: Request) -> None:
        if request is None:
            raise RequestValidationError(message="request is required")
        try:
            RequestDTO.model_validate(_project(request))
        except ValidationError as e:
            raise RequestValidationError(
                message=_summarize(e),
                model=getattr(request, "model", None),
                raw=e,
            ) from e


class CallableValidator:
    """Adapt a predicate ``(request) -> bool`` to the Validator protocol."""

    def __init__(self, predicate: Callable[[Request], bool], message: str = "request rejected by validator") -> None:
        self._predicate = predicate
        self._message = message

    def validate(self, request: Request) -> None:
        if not self._predicate(request):
            raise RequestValidationError(message=self._message, model=getattr(request, "model", None))


class CompositeValidator:
    """Run validators in order; the first failure propagates."""

    def __init__(self, validators: Iterable[Validator]) -> None:
        self._validators: Tuple[Validator, ...] = tuple(validators)

    def validate(self, request: Request) -> None:
        for validator in self._validators:
            validator.validate(request)


__all__ = ["DefaultRequestValidator", "CallableValidator", "CompositeValidator"]
