r"""Abstract base class for backoff strategies."""

from __future__ import annotations

__all__ = ["BaseBackoffStrategy"]

from abc import ABC, abstractmethod


class BaseBackoffStrategy(ABC):
    """Abstract base class for backoff strategies.

    A backoff strategy determines how long to wait before retrying a
    failed call based on the retry number.
    """

    @abstractmethod
    def calculate(self, attempt: int) -> float:
        """Calculate the delay before a given retry.

        Args:
            attempt: The retry number (0-indexed). For example,
                attempt=0 is the first retry, attempt=1 is the second retry, etc.

        Returns:
            The delay in seconds before the retry.
        """
