"""Interface protocols, one per module."""

from .request import Request
from .response import Response
from .validator import Validator
from .transport import Transport
from .chat_model import Model

__all__ = ["Request", "Response", "Validator", "Transport", "Model"]
