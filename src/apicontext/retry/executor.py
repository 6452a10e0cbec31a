r"""Synchronous retry executor.

The executor runs the attempts of one logical call as an explicit,
bounded loop. It never raises on a non-success status: a call that is not
retried, or whose retry budget is exhausted, returns ``None``.
"""

from __future__ import annotations

__all__ = ["RetryExecutor"]

import logging
import time
from typing import TYPE_CHECKING, Any

from apicontext.catalog import HttpStatus
from apicontext.retry.executor_core import classify_status, read_response
from apicontext.retry.manager import CallbackManager
from apicontext.retry.policy import RetryPolicy
from apicontext.utils.structured_logging import log_structured

if TYPE_CHECKING:
    from collections.abc import Callable

    from apicontext.core.config import ContextConfig

logger: logging.Logger = logging.getLogger(__name__)


class RetryExecutor:
    """Execute a call with the retry behavior of a context
    configuration.

    Args:
        config: The context configuration.

    Attributes:
        config: The context configuration.
        policy: The retry policy built from the configuration.
        callbacks: The callback manager built from the configuration.
    """

    def __init__(self, config: ContextConfig) -> None:
        self.config = config
        self.policy = RetryPolicy.from_config(config)
        self.callbacks = CallbackManager(config)

    def execute(self, send: Callable[[], Any]) -> str | None:
        """Execute a call with retry logic.

        A wait between two attempts ends the call with ``None`` if a
        signal handler raises ``InterruptedError`` during it. A signal that
        only interrupts the underlying system call does not: ``time.sleep``
        resumes the wait by itself (PEP 475).

        Args:
            send: Function performing one attempt and returning its status
                code and body.

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
            status_code, body = read_response(send())
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
            try:
                time.sleep(decision.delay)
            except InterruptedError:
                logger.warning(f"Wait before retry {attempt + 1} was interrupted, giving up")
                reason = "retry interrupted"
                break

        logger.debug(f"Call failed after {attempt + 1} attempt(s) ({reason})")
        self.callbacks.on_failure(attempt, max_retries, status, reason, start_time)
        return None
