r"""Closed catalog of the HTTP methods a communicator may use."""

from __future__ import annotations

__all__ = ["HttpMethod"]

from enum import Enum


class HttpMethod(str, Enum):
    r"""HTTP request methods.

    Example:
        ```pycon
        >>> from apicontext.catalog import HttpMethod
        >>> HttpMethod.from_name("post")
        <HttpMethod.POST: 'POST'>
        >>> HttpMethod.from_name("TRACE") is None
        True

        ```
    """

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"

    @classmethod
    def from_name(cls, name: str) -> HttpMethod | None:
        r"""Look up a method by name (case-insensitive).

        Args:
            name: The method name, e.g. ``"get"``.

        Returns:
            The matching method, or ``None`` if it is not in the catalog.
        """
        try:
            return cls(name.upper())
        except ValueError:
            return None

    def sends_body(self) -> bool:
        r"""Indicate whether request parameters travel in the body
        rather than in the query string."""
        return self in {HttpMethod.POST, HttpMethod.PUT, HttpMethod.PATCH}
