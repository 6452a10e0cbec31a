r"""Asynchronous retry executor.

The asynchronous twin of ``RetryExecutor``: attempts are awaited and the
wait between two attempts uses ``asyncio.sleep``. Cancellation propagates
to the caller.
"""

from __future__ import annotations

__all__ = ["AsyncRetryExecutor"]

import asyncio
import logging
import time
from typing import TYPE_CHECKING, Any

from apicontext.catalog import HttpStatus
from apicontext.retry.executor_core import classify_status, read_response
from apicontext.retry.manager import CallbackManager
from apicontext.retry.policy import RetryPolicy
from apicontext.utils.structured_logging import log_structured

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from apicontext.core.config import ContextConfig

logger: logging.Logger = logging.getLogger(__name__)


class AsyncRetryExecutor:
    """Execute an asynchronous call with the retry behavior of a
    context configuration.

    Args:
        config: The context configuration.
    """

    def __init__(self, config: ContextConfig) -> None:
        self.config = config
        self.policy = RetryPolicy.from_config(config)
        self.callbacks = CallbackManager(config)

    async def execute(self, send: Callable[[], Awaitable[Any]]) -> str | None:
        """Execute an asynchronous call with retry logic.

        Args:
            send: Coroutine function performing one attempt and returning
                its status code and body.

        Returns:
            The response body if an attempt returned ``200 OK``,
                otherwise ``None``.

        Raises:
            UnsupportedHttpStatusError: If an attempt returned a status
                code that is not in the status catalog.
        """
        start_time = time.time()
        max_retries = self.policy.max_retries
        reason = ""

        for attempt in range(self.policy.max_attempts):
            self.callbacks.on_request(attempt, max_retries)
            status_code, body = read_response(await send())
            status = classify_status(status_code)
            log_structured(
                logger,
                logging.DEBUG,
                f"Attempt {attempt + 1}/{self.policy.max_attempts} returned status {status_code}",
                attempt=attempt + 1,
                status_code=status_code,
            )

            if status is HttpStatus.OK:
                self.callbacks.on_success(attempt, max_retries, body, start_time)
                return body

            decision = self.policy.decide(status, attempt)
            reason = decision.reason
            if not decision.should_retry:
                break

            self.callbacks.on_retry(attempt, max_retries, decision.delay, status)
            logger.debug(f"Will retry ({reason}), waiting {decision.delay:.2f}s")
            await asyncio.sleep(decision.delay)

        logger.debug(f"Call failed after {attempt + 1} attempt(s) ({reason})")
        self.callbacks.on_failure(attempt, max_retries, status, reason, start_time)
        return None
