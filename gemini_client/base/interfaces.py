"""
Interface protocols public surface.

Re-exports the single-class modules under
``gemini_client.base.interfaces_parts``.
"""

from .interfaces_parts.request import Request
from .interfaces_parts.response import Response
from .interfaces_parts.validator import Validator
from .interfaces_parts.transport import Transport
from .interfaces_parts.chat_model import Model

__all__ = ["Request", "Response", "Validator", "Transport", "Model"]
