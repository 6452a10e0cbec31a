r"""Communicators backed by httpx.

``HttpxCommunicator`` and ``AsyncHttpxCommunicator`` send one request,
described by a URL, a method and optional request parameters, and return
its status code and body. Request parameters are encoded with
``create_request_parameter`` and travel in the query string for GET and
DELETE, and in a form-encoded body for POST, PUT and PATCH.
"""

from __future__ import annotations

__all__ = ["AsyncHttpxCommunicator", "HttpxCommunicator"]

import logging
from typing import TYPE_CHECKING, Any

import httpx

from apicontext.catalog import ContentType, HttpMethod
from apicontext.communicator import AsyncCommunicator, Communicator, CommunicatorResponse
from apicontext.core.config import DEFAULT_TIMEOUT
from apicontext.core.validation import validate_timeout

if TYPE_CHECKING:
    from types import TracebackType
    from typing import Self

logger: logging.Logger = logging.getLogger(__name__)

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


def build_request_kwargs(
    communicator: HttpxCommunicator | AsyncHttpxCommunicator,
) -> dict[str, Any]:
    """Build the keyword arguments of ``httpx.Client.request``.

    Args:
        communicator: The communicator describing the request.

    Returns:
        The keyword arguments, without the method and the URL.
    """
    headers = httpx.Headers(communicator.headers)
    if communicator.accept is not None:
        headers.setdefault("Accept", communicator.accept.tag)
    kwargs: dict[str, Any] = {"headers": headers}
    if communicator.parameter is None:
        return kwargs

    encoded = communicator.create_request_parameter(communicator.parameter)
    if not encoded:
        return kwargs
    if communicator.method.sends_body():
        headers.setdefault("Content-Type", FORM_CONTENT_TYPE)
        kwargs["content"] = encoded.encode("utf-8")
    else:
        # Already encoded, so it is appended as is rather than passed as params
        separator = "&" if "?" in communicator.url else "?"
        kwargs["url"] = f"{communicator.url}{separator}{encoded}"
    return kwargs


class _HttpxRequestMixin:

    def _init_request(
        self,
        url: str,
        method: HttpMethod | str,
        parameter: Any,
        accept: ContentType | None,
        headers: dict[str, str] | None,
        timeout: float | httpx.Timeout,
    ) -> None:
        validate_timeout(timeout)
        resolved = method if isinstance(method, HttpMethod) else HttpMethod.from_name(method)
        if resolved is None:
            msg = f"unsupported HTTP method: {method!r}"
            raise ValueError(msg)
        self.url = url
        self.method = resolved
        self.parameter = parameter
        self.accept = accept
        self.headers = headers or {}
        self.timeout = timeout


class HttpxCommunicator(_HttpxRequestMixin, Communicator):
    r"""Synchronous communicator sending one request with
    ``httpx.Client``.

    Two usage patterns are supported, as with any httpx client wrapper:
    pass a ``client`` whose lifecycle is managed by the caller, or let the
    communicator create its own client, which is closed by ``close()`` or
    when leaving a ``with`` block.

    Args:
        url: The URL of the API.
        method: The HTTP method. Defaults to GET.
        parameter: Optional request parameters (``RequestParameter``
            dataclass instance, ``ParameterSource`` or mapping).
        accept: Optional content type sent in the ``Accept`` header.
        headers: Optional extra request headers.
        client: Optional ``httpx.Client`` to use.
        timeout: Timeout of the created client. Ignored if ``client`` is
            given. Must be > 0.

    Example:
        ```pycon
        >>> import httpx
        >>> from apicontext.transport import HttpxCommunicator
        >>> transport = httpx.MockTransport(lambda request: httpx.Response(200, text="pong"))
        >>> with HttpxCommunicator(
        ...     "https://api.example.com/ping", client=httpx.Client(transport=transport)
        ... ) as communicator:
        ...     communicator.send()
        ...
        CommunicatorResponse(status_code=200, body='pong')

        ```
    """

    def __init__(
        self,
        url: str,
        method: HttpMethod | str = HttpMethod.GET,
        *,
        parameter: Any = None,
        accept: ContentType | None = None,
        headers: dict[str, str] | None = None,
        client: httpx.Client | None = None,
        timeout: float | httpx.Timeout = DEFAULT_TIMEOUT,
    ) -> None:
        self._init_request(url, method, parameter, accept, headers, timeout)
        self._owns_client = client is None
        self._client: httpx.Client = client or httpx.Client(timeout=timeout)

    def send(self) -> CommunicatorResponse:
        kwargs = build_request_kwargs(self)
        url = kwargs.pop("url", self.url)
        logger.debug(f"Sending {self.method.value} request to {url}")
        response = self._client.request(self.method.value, url, **kwargs)
        return CommunicatorResponse(status_code=response.status_code, body=response.text)

    def close(self) -> None:
        r"""Close the underlying client if this communicator created
        it."""
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()


class AsyncHttpxCommunicator(_HttpxRequestMixin, AsyncCommunicator):
    r"""Asynchronous communicator sending one request with
    ``httpx.AsyncClient``.

    Args:
        url: The URL of the API.
        method: The HTTP method. Defaults to GET.
        parameter: Optional request parameters.
        accept: Optional content type sent in the ``Accept`` header.
        headers: Optional extra request headers.
        client: Optional ``httpx.AsyncClient`` to use.
        timeout: Timeout of the created client. Ignored if ``client`` is
            given. Must be > 0.
    """

    def __init__(
        self,
        url: str,
        method: HttpMethod | str = HttpMethod.GET,
        *,
        parameter: Any = None,
        accept: ContentType | None = None,
        headers: dict[str, str] | None = None,
        client: httpx.AsyncClient | None = None,
        timeout: float | httpx.Timeout = DEFAULT_TIMEOUT,
    ) -> None:
        self._init_request(url, method, parameter, accept, headers, timeout)
        self._owns_client = client is None
        self._client: httpx.AsyncClient = client or httpx.AsyncClient(timeout=timeout)

    async def send(self) -> CommunicatorResponse:
        kwargs = build_request_kwargs(self)
        url = kwargs.pop("url", self.url)
        logger.debug(f"Sending {self.method.value} request to {url}")
        response = await self._client.request(self.method.value, url, **kwargs)
        return CommunicatorResponse(status_code=response.status_code, body=response.text)

    async def aclose(self) -> None:
        r"""Close the underlying client if this communicator created
        it."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.aclose()
