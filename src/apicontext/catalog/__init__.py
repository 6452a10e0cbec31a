r"""Closed catalogs of HTTP status codes, methods and content types."""

from __future__ import annotations

__all__ = ["ContentType", "HttpMethod", "HttpStatus"]

from apicontext.catalog.content_type import ContentType
from apicontext.catalog.http_method import HttpMethod
from apicontext.catalog.http_status import HttpStatus
