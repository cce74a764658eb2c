"""Small convenience helpers built on the base layers."""

from .simple import simple

__all__ = ["simple"]
