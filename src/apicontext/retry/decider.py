r"""Retry decision logic for determining whether to retry a call.

This module provides the RetryDecider class that encapsulates the logic
for deciding whether an attempt should be retried based on its status and
on the remaining retry budget.
"""

from __future__ import annotations

__all__ = ["RetryDecider"]

import logging
from typing import TYPE_CHECKING

from apicontext.catalog import HttpStatus
from apicontext.core.config import RETRYABLE_STATUSES

if TYPE_CHECKING:
    from collections.abc import Iterable

logger: logging.Logger = logging.getLogger(__name__)


class RetryDecider:
    """Decides whether an attempt should be retried.

    Only the statuses in ``retryable_statuses`` are retried. Client errors
    other than a timeout are never retried, so that they are not mistaken
    for transient conditions.

    Args:
        retryable_statuses: The statuses that may be retried.
            Defaults to request timeout (408) and internal server error (500).
    """

    def __init__(self, retryable_statuses: Iterable[HttpStatus] = RETRYABLE_STATUSES) -> None:
        self.retryable_statuses = frozenset(retryable_statuses)

    def should_retry(self, status: HttpStatus, attempt: int, max_retries: int) -> tuple[bool, str]:
        """Determine if a status should trigger a retry.

        Args:
            status: The classified status of the attempt.
            attempt: Current attempt number (0-indexed).
            max_retries: Maximum number of retries.

        Returns:
            Tuple of (should_retry, reason).
        """
        if status is HttpStatus.OK:
            return (False, "success")
        if status not in self.retryable_statuses:
            logger.debug(f"Status {status.code} ({status.name}) is not retryable")
            return (False, f"non-retryable status {status.code}")
        if attempt >= max_retries:
            return (False, "max retries exhausted")
        return (True, f"status {status.code}")
