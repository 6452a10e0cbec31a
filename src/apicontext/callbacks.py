r"""Callback data structures for observability.

This module enables users to hook into the lifecycle of an API call for
logging, metrics or alerting. Four hooks are available, all configured on
``ContextConfig``:

- on_request: Called before each attempt
- on_retry: Called before each retry (before the wait)
- on_success: Called when a call returns a body
- on_failure: Called when a call ends without a body (soft failure)

Example:
    ```pycon
    >>> from apicontext.callbacks import RetryInfo
    >>> from apicontext.core import ContextConfig
    >>> def log_retry(retry_info: RetryInfo) -> None:
    ...     print(f"Retry {retry_info.attempt}/{retry_info.max_retries + 1}")
    ...
    >>> config = ContextConfig(retry=True, max_retries=2, on_retry=log_retry)

    ```
"""

from __future__ import annotations

__all__ = ["FailureInfo", "RequestInfo", "ResponseInfo", "RetryInfo"]

from dataclasses import dataclass

from apicontext.catalog import HttpStatus


@dataclass
class RequestInfo:
    """Argument of the ``on_request`` hook, given before an attempt.

    Attributes:
        attempt: The attempt about to be sent, starting at 1.
        max_retries: The retry budget of the context.
    """

    attempt: int
    max_retries: int


@dataclass
class RetryInfo:
    """Argument of the ``on_retry`` hook, given before the wait.

    Attributes:
        attempt: The attempt the retry will send. The first retry is
            attempt 2.
        max_retries: The retry budget of the context.
        wait_time: The seconds the context waits before sending it.
        status: The transient status of the previous attempt.
    """

    attempt: int
    max_retries: int
    wait_time: float
    status: HttpStatus


@dataclass
class ResponseInfo:
    """Argument of the ``on_success`` hook, given once a call gets
    ``200 OK``.

    Attributes:
        attempt: The attempt that got ``200 OK``, starting at 1.
        max_retries: The retry budget of the context.
        body: The body returned to the caller.
        total_time: Seconds elapsed since the call started, waits included.
    """

    attempt: int
    max_retries: int
    body: str | None
    total_time: float


@dataclass
class FailureInfo:
    """Argument of the ``on_failure`` hook, given when a call returns
    ``None``.

    Attributes:
        attempt: The last attempt sent, starting at 1.
        max_retries: The retry budget of the context.
        status: The status of the last attempt.
        reason: Why no further attempt was sent, e.g.
            ``"max retries exhausted"``.
        total_time: Seconds elapsed since the call started, waits included.
    """

    attempt: int
    max_retries: int
    status: HttpStatus
    reason: str
    total_time: float
