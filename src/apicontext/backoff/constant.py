r"""Constant backoff strategy."""

from __future__ import annotations

__all__ = ["ConstantBackoff"]

from apicontext.backoff.base import BaseBackoffStrategy
from apicontext.core.config import DEFAULT_DELAY
from apicontext.exceptions import InvalidContextStateError


class ConstantBackoff(BaseBackoffStrategy):
    """Constant/fixed backoff strategy.

    Returns the same delay for every retry, regardless of the retry number.

    Args:
        delay: The fixed delay in seconds (default: 5.0).

    Raises:
        InvalidContextStateError: If delay is negative.

    Example:
        ```pycon
        >>> from apicontext.backoff import ConstantBackoff
        >>> backoff = ConstantBackoff(delay=2.5)
        >>> backoff.calculate(0)
        2.5
        >>> backoff.calculate(10)
        2.5

        ```
    """

    def __init__(self, delay: float = DEFAULT_DELAY) -> None:
        if delay < 0:
            msg = f"delay must be >= 0, got {delay}"
            raise InvalidContextStateError(msg)

        self.delay = delay

    def calculate(self, attempt: int) -> float:  # noqa: ARG002
        """Calculate constant backoff delay.

        Args:
            attempt: The retry number (0-indexed, unused).

        Returns:
            The fixed delay value.
        """
        return self.delay

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(delay={self.delay})"
