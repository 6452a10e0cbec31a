r"""Shared core logic for retry executors.

This module provides helper functions used by both the synchronous and
the asynchronous retry executors to read and classify the result of an
attempt.
"""

from __future__ import annotations

__all__ = ["classify_status", "read_response"]

import logging
from typing import Any

from apicontext.catalog import HttpStatus
from apicontext.exceptions import UnsupportedHttpStatusError

logger: logging.Logger = logging.getLogger(__name__)


def read_response(response: Any) -> tuple[int, str | None]:
    """Read the status code and the body returned by a communicator.

    Args:
        response: A ``(status_code, body)`` pair such as
            ``CommunicatorResponse``, or an object exposing
            ``status_code`` and ``text`` attributes such as
            ``httpx.Response``.

    Returns:
        Tuple of (status_code, body).

    Raises:
        TypeError: If the response has none of the supported shapes.

    Example:
        ```pycon
        >>> from apicontext.retry.executor_core import read_response
        >>> read_response((200, "ok"))
        (200, 'ok')

        ```
    """
    if isinstance(response, tuple) and len(response) == 2:
        status_code, body = response
        return (int(status_code), body)
    if hasattr(response, "status_code"):
        return (int(response.status_code), getattr(response, "text", None))
    msg = (
        "communicator must return a (status_code, body) pair or a response "
        f"with a status_code attribute, got {type(response).__qualname__}"
    )
    raise TypeError(msg)


def classify_status(status_code: int) -> HttpStatus:
    """Classify a status code against the status catalog.

    Args:
        status_code: The numeric status code.

    Returns:
        The catalog entry of the status code.

    Raises:
        UnsupportedHttpStatusError: If the status code is not in the catalog.

    Example:
        ```pycon
        >>> from apicontext.retry.executor_core import classify_status
        >>> classify_status(408)
        <HttpStatus.REQUEST_TIMEOUT: 408>

        ```
    """
    status = HttpStatus.from_code(status_code)
    if status is None:
        logger.debug(f"Status code {status_code} is not in the status catalog")
        raise UnsupportedHttpStatusError(status_code)
    return status
