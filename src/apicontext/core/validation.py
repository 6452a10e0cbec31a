r"""Parameter validation utilities for the context configuration.

This module provides validation functions ensuring that retry
parameters meet their constraints when a context is built, rather than
when a retry is attempted.
"""

from __future__ import annotations

__all__ = ["validate_communicator", "validate_retry_params", "validate_timeout"]

from typing import TYPE_CHECKING, Any

from apicontext.exceptions import InvalidContextStateError

if TYPE_CHECKING:
    import httpx


def validate_timeout(timeout: float | httpx.Timeout) -> None:
    """Validate timeout parameter.

    Args:
        timeout: Maximum seconds to wait for server responses.
            Must be > 0 if provided as a numeric value.

    Raises:
        ValueError: If timeout is a numeric value <= 0.

    Example:
        ```pycon
        >>> from apicontext.core.validation import validate_timeout
        >>> validate_timeout(10.0)
        >>> validate_timeout(0)  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        ValueError: timeout must be > 0, got 0

        ```
    """
    if isinstance(timeout, (int, float)) and timeout <= 0:
        msg = f"timeout must be > 0, got {timeout}"
        raise ValueError(msg)


def validate_retry_params(max_retries: int, delay: float) -> None:
    """Validate retry parameters.

    Args:
        max_retries: Maximum number of retry attempts. Must be >= 0.
            A value of 0 means no retries (only the initial attempt).
        delay: Seconds to wait between two attempts. Must be >= 0.

    Raises:
        InvalidContextStateError: If max_retries or delay are negative.

    Example:
        ```pycon
        >>> from apicontext.core import validate_retry_params
        >>> validate_retry_params(max_retries=3, delay=5.0)
        >>> validate_retry_params(max_retries=3, delay=-1.0)  # doctest: +SKIP

        ```
    """
    if max_retries < 0:
        msg = f"max_retries must be >= 0, got {max_retries}"
        raise InvalidContextStateError(msg)
    if delay < 0:
        msg = f"delay must be >= 0, got {delay}"
        raise InvalidContextStateError(msg)


def validate_communicator(communicator: Any) -> None:
    """Validate that a communicator was given.

    Args:
        communicator: The communicator to validate.

    Raises:
        InvalidContextStateError: If communicator is None.
    """
    if communicator is None:
        msg = "a communicator is required to build an API context"
        raise InvalidContextStateError(msg)
