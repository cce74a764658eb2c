"""
ChatResponse returned by ``ChatModel.call``.

Every call that passes validation yields one of these, including transport
failures (``successful=False``, ``status_code=500``).
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from ..errors import ErrorCode
from .response_body import ResponseBody


@dataclass(frozen=True)
class ChatResponse:
    """Outcome of one chat call.

    Attributes:
        status_code: HTTP status (500 for synthesized transport failures).
        body: Mapped `ResponseBody`; never ``None``.
        headers: Response headers, first value per name.
        successful: True for 2xx statuses.
        error_message: Upstream or transport error text for failed calls.
        error_code: Normalized classification of the failure, if any.
    """

    status_code: int
    body: ResponseBody
    headers: Dict[str, str] = field(default_factory=dict)
    successful: bool = False
    error_message: Optional[str] = None
    error_code: Optional[ErrorCode] = None

    @property
    def text(self) -> Optional[str]:
        return self.body.text

    def to_dict(self) -> Dict[str, Any]:
        return {
            "status_code": self.status_code,
            "successful": self.successful,
            "headers": dict(self.headers),
            "error_message": self.error_message,
            "error_code": self.error_code.value if self.error_code else None,
            "body": self.body.to_dict(),
        }


__all__ = ["ChatResponse"]
