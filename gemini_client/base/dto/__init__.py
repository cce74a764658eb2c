"""DTO validation package for outbound requests."""

from .request import PartDTO, ContentDTO, RequestBodyDTO, RequestDTO, HttpMethod

__all__ = ["PartDTO", "ContentDTO", "RequestBodyDTO", "RequestDTO", "HttpMethod"]
