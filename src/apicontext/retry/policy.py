r"""Retry policy combining the retry decision and the wait before the
next attempt."""

from __future__ import annotations

__all__ = ["RetryDecision", "RetryPolicy"]

from typing import TYPE_CHECKING, NamedTuple

from apicontext.backoff import BaseBackoffStrategy, ConstantBackoff
from apicontext.core.config import RETRYABLE_STATUSES
from apicontext.retry.decider import RetryDecider

if TYPE_CHECKING:
    from collections.abc import Iterable

    from apicontext.catalog import HttpStatus
    from apicontext.core.config import ContextConfig


class RetryDecision(NamedTuple):
    """Outcome of a retry decision.

    Attributes:
        should_retry: Whether another attempt should be made.
        delay: Seconds to wait before the next attempt (0 if no retry).
        reason: Human readable reason of the decision.
    """

    should_retry: bool
    delay: float
    reason: str


class RetryPolicy:
    """Decide, from a status and an attempt count, whether and when to
    retry.

    Args:
        enabled: Whether retries are enabled at all.
        max_retries: Maximum number of retries after the initial attempt.
        backoff: The strategy computing the wait before each retry.
            Defaults to a constant 5 seconds.
        retryable_statuses: The statuses that may be retried.

    Example:
        ```pycon
        >>> from apicontext.catalog import HttpStatus
        >>> from apicontext.backoff import ConstantBackoff
        >>> from apicontext.retry import RetryPolicy
        >>> policy = RetryPolicy(enabled=True, max_retries=1, backoff=ConstantBackoff(0.5))
        >>> policy.decide(HttpStatus.INTERNAL_SERVER_ERROR, attempt=0)
        RetryDecision(should_retry=True, delay=0.5, reason='status 500')
        >>> policy.decide(HttpStatus.INTERNAL_SERVER_ERROR, attempt=1)
        RetryDecision(should_retry=False, delay=0.0, reason='max retries exhausted')
        >>> policy.decide(HttpStatus.NOT_FOUND, attempt=0)
        RetryDecision(should_retry=False, delay=0.0, reason='non-retryable status 404')

        ```
    """

    def __init__(
        self,
        enabled: bool = False,
        max_retries: int = 0,
        backoff: BaseBackoffStrategy | None = None,
        retryable_statuses: Iterable[HttpStatus] = RETRYABLE_STATUSES,
    ) -> None:
        self.enabled = enabled
        self.max_retries = max_retries
        self.backoff: BaseBackoffStrategy = backoff if backoff is not None else ConstantBackoff()
        self.decider = RetryDecider(retryable_statuses)

    @classmethod
    def from_config(cls, config: ContextConfig) -> RetryPolicy:
        """Build the policy described by a context configuration.

        Args:
            config: The context configuration.

        Returns:
            The retry policy.
        """
        return cls(
            enabled=config.retry,
            max_retries=config.max_retries,
            backoff=ConstantBackoff(config.delay),
        )

    @property
    def max_attempts(self) -> int:
        """Total number of attempts allowed, including the initial one."""
        return self.max_retries + 1 if self.enabled else 1

    def decide(self, status: HttpStatus, attempt: int) -> RetryDecision:
        """Decide whether to retry after an attempt.

        Args:
            status: The classified status of the attempt.
            attempt: Current attempt number (0-indexed).

        Returns:
            The retry decision.
        """
        if not self.enabled:
            return RetryDecision(should_retry=False, delay=0.0, reason="retry disabled")
        should_retry, reason = self.decider.should_retry(status, attempt, self.max_retries)
        delay = self.backoff.calculate(attempt) if should_retry else 0.0
        return RetryDecision(should_retry=should_retry, delay=delay, reason=reason)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(enabled={self.enabled}, "
            f"max_retries={self.max_retries}, backoff={self.backoff!r})"
        )
