r"""apicontext - Retrying execution context for external HTTP API calls.

This package decouples "build a request, send it, interpret the response"
from "how many times to retry and how to build the parameters".

Key Features:
    - ``ApiContext`` and ``AsyncApiContext``: execute a call through a
      pluggable communicator, retrying request timeouts (408) and internal
      server errors (500) with a fixed delay, up to a bounded count
    - Soft failures: a call that does not end on ``200 OK`` returns ``None``
    - Closed status catalog: unknown status codes raise
      ``UnsupportedHttpStatusError`` and are never retried
    - Declarative request parameters encoded as ``key=value&key2=value2``
    - httpx-backed communicators

Example:
    ```pycon
    >>> from dataclasses import dataclass
    >>> from apicontext import ApiContext, RequestParameter, parameter
    >>> from apicontext.transport import HttpxCommunicator
    >>> @dataclass
    ... class SearchQuery(RequestParameter):
    ...     keyword: str = parameter(alias="q")
    ...
    >>> communicator = HttpxCommunicator(
    ...     "https://api.example.com/search", parameter=SearchQuery(keyword="python")
    ... )
    >>> context = (
    ...     ApiContext.builder().of(communicator).with_retry().with_retry_count(3).build()
    ... )
    >>> body = context.execute()  # doctest: +SKIP

    ```
"""

from __future__ import annotations

__all__ = [
    "ApiContext",
    "ApiContextError",
    "AsyncApiContext",
    "AsyncCommunicator",
    "Communicator",
    "CommunicatorResponse",
    "ContentType",
    "ContextConfig",
    "HttpMethod",
    "HttpStatus",
    "InvalidContextStateError",
    "InvalidParameterStateError",
    "RequestParameter",
    "ResourcePath",
    "UnsupportedHttpStatusError",
    "__version__",
    "create_request_parameter",
    "parameter",
]

from importlib.metadata import PackageNotFoundError, version

from apicontext.catalog import ContentType, HttpMethod, HttpStatus
from apicontext.communicator import AsyncCommunicator, Communicator, CommunicatorResponse
from apicontext.context import ApiContext
from apicontext.context_async import AsyncApiContext
from apicontext.core.config import ContextConfig
from apicontext.exceptions import (
    ApiContextError,
    InvalidContextStateError,
    InvalidParameterStateError,
    UnsupportedHttpStatusError,
)
from apicontext.params import RequestParameter, create_request_parameter, parameter
from apicontext.resource import ResourcePath

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"
