r"""Callback manager for the lifecycle events of an API call."""

from __future__ import annotations

__all__ = ["CallbackManager"]

import time
from typing import TYPE_CHECKING

from apicontext.callbacks import FailureInfo, RequestInfo, ResponseInfo, RetryInfo

if TYPE_CHECKING:
    from apicontext.catalog import HttpStatus
    from apicontext.core.config import ContextConfig


class CallbackManager:
    """Manages callback invocations during the retry lifecycle.

    Attempt numbers are 0-indexed when given to the manager and 1-indexed
    in the information passed to the callbacks.

    Attributes:
        config: Configuration containing the callback functions.
    """

    def __init__(self, config: ContextConfig) -> None:
        self.config = config

    def on_request(self, attempt: int, max_retries: int) -> None:
        """Invoke on_request callback.

        Args:
            attempt: Current attempt number (0-indexed).
            max_retries: Maximum number of retries.
        """
        if self.config.on_request is not None:
            self.config.on_request(RequestInfo(attempt=attempt + 1, max_retries=max_retries))

    def on_retry(
        self, attempt: int, max_retries: int, wait_time: float, status: HttpStatus
    ) -> None:
        """Invoke on_retry callback.

        Args:
            attempt: Number of the attempt that failed (0-indexed).
            max_retries: Maximum number of retries.
            wait_time: Wait in seconds before the retry.
            status: Status that triggered the retry.
        """
        if self.config.on_retry is not None:
            self.config.on_retry(
                RetryInfo(
                    attempt=attempt + 2,
                    max_retries=max_retries,
                    wait_time=wait_time,
                    status=status,
                )
            )

    def on_success(
        self, attempt: int, max_retries: int, body: str | None, start_time: float
    ) -> None:
        """Invoke on_success callback.

        Args:
            attempt: Attempt number that succeeded (0-indexed).
            max_retries: Maximum number of retries.
            body: The response body.
            start_time: Timestamp when the call started.
        """
        if self.config.on_success is not None:
            self.config.on_success(
                ResponseInfo(
                    attempt=attempt + 1,
                    max_retries=max_retries,
                    body=body,
                    total_time=time.time() - start_time,
                )
            )

    def on_failure(
        self,
        attempt: int,
        max_retries: int,
        status: HttpStatus,
        reason: str,
        start_time: float,
    ) -> None:
        """Invoke on_failure callback.

        Args:
            attempt: Final attempt number (0-indexed).
            max_retries: Maximum number of retries.
            status: The final status.
            reason: Why the call was not retried further.
            start_time: Timestamp when the call started.
        """
        if self.config.on_failure is not None:
            self.config.on_failure(
                FailureInfo(
                    attempt=attempt + 1,
                    max_retries=max_retries,
                    status=status,
                    reason=reason,
                    total_time=time.time() - start_time,
                )
            )
