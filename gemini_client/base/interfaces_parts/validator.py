"""Validator Protocol (single-class module)."""

from __future__ import annotations

from typing import Protocol, TypeVar, runtime_checkable

T_contra = TypeVar("T_contra", contravariant=True)


@runtime_checkable
class Validator(Protocol[T_contra]):
    """Pre-dispatch check over a request.

    ``validate`` returns ``None`` when the object is acceptable and raises
    :class:`~gemini_client.base.errors.RequestValidationError` otherwise.
    Implementations must not perform I/O and must be safe for concurrent use.
    """

    def validate(self, obj: T_contra) -> None: ...
