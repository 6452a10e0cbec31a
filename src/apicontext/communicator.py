r"""Communicator interfaces performing the network call of an API.

A communicator is supplied by the caller when a context is built. The
context only calls ``send`` and reads the status code and body it
returns; how the request is built and which transport carries it is the
communicator's business.
"""

from __future__ import annotations

__all__ = ["AsyncCommunicator", "Communicator", "CommunicatorResponse"]

from abc import ABC, abstractmethod
from typing import Any, NamedTuple

from apicontext.params import create_request_parameter


class CommunicatorResponse(NamedTuple):
    r"""Status code and body returned by one attempt.

    Attributes:
        status_code: The numeric HTTP status code.
        body: The response body as text, if any.
    """

    status_code: int
    body: str | None = None


class _ParameterMixin:

    @staticmethod
    def create_request_parameter(parameter: Any) -> str:
        r"""Create the URL-encoded request parameters of a structure.

        Args:
            parameter: A ``RequestParameter`` dataclass instance, a
                ``ParameterSource`` or a mapping.

        Returns:
            The encoded parameters, e.g. ``"key1=value1&key2=value2"``.

        Raises:
            TypeError: if ``parameter`` is ``None``.
            InvalidParameterStateError: if a value cannot be read.
        """
        return create_request_parameter(parameter)


class Communicator(_ParameterMixin, ABC):
    r"""Abstract base class of the synchronous communicators.

    Example:
        ```pycon
        >>> from apicontext.communicator import Communicator, CommunicatorResponse
        >>> class Echo(Communicator):
        ...     def send(self) -> CommunicatorResponse:
        ...         return CommunicatorResponse(200, self.create_request_parameter({"q": "a b"}))
        ...
        >>> Echo().send()
        CommunicatorResponse(status_code=200, body='q=a+b')

        ```
    """

    @abstractmethod
    def send(self) -> CommunicatorResponse:
        r"""Send the request and return its status code and body.

        Implementations may also return any object exposing
        ``status_code`` and ``text`` attributes, such as
        ``httpx.Response``.
        """


class AsyncCommunicator(_ParameterMixin, ABC):
    r"""Abstract base class of the asynchronous communicators."""

    @abstractmethod
    async def send(self) -> CommunicatorResponse:
        r"""Send the request and return its status code and body."""
