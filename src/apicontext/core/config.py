r"""Configuration dataclass and defaults for ApiContext.

This module provides configuration constants and a frozen
dataclass-based configuration object shared by ``ApiContext`` and
``AsyncApiContext``.
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_DELAY",
    "DEFAULT_MAX_RETRIES",
    "DEFAULT_TIMEOUT",
    "RETRYABLE_STATUSES",
    "ContextConfig",
]

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any

from apicontext.catalog import HttpStatus
from apicontext.core.validation import validate_retry_params

if TYPE_CHECKING:
    from collections.abc import Callable

    from apicontext.callbacks import FailureInfo, RequestInfo, ResponseInfo, RetryInfo


# Default timeout in seconds for the bundled httpx communicators
DEFAULT_TIMEOUT = 10.0

# Retry is disabled by default
# Total attempts = max_retries + 1 (initial attempt)
DEFAULT_MAX_RETRIES = 0

# Default wait in seconds between two attempts
DEFAULT_DELAY = 5.0

# Statuses that are considered transient and may be retried
# 408: Request Timeout
# 500: Internal Server Error
RETRYABLE_STATUSES = frozenset({HttpStatus.REQUEST_TIMEOUT, HttpStatus.INTERNAL_SERVER_ERROR})


@dataclass(frozen=True)
class ContextConfig:
    """Configuration of the retry behavior of an API context.

    The configuration is validated once, when it is created, and cannot
    be modified afterwards.

    Args:
        retry: Whether transient failures are retried. Disabled by default.
        max_retries: Maximum number of retries after the initial attempt.
            Must be >= 0.
        delay: Seconds to wait between two attempts. Must be >= 0.
        on_request: Optional callback called before each attempt.
        on_retry: Optional callback called before each retry (before the wait).
        on_success: Optional callback called when a call succeeds.
        on_failure: Optional callback called when a call ends without a body.

    Raises:
        InvalidContextStateError: If max_retries or delay are negative.

    Example:
        ```pycon
        >>> from apicontext.core.config import ContextConfig
        >>> config = ContextConfig()
        >>> config.retry, config.max_retries, config.delay
        (False, 0, 5.0)
        >>> config = ContextConfig(retry=True, max_retries=3)
        >>> config.merge(delay=0.5).delay
        0.5
        >>> config.delay  # Original unchanged
        5.0

        ```
    """

    retry: bool = False
    max_retries: int = DEFAULT_MAX_RETRIES
    delay: float = DEFAULT_DELAY
    on_request: Callable[[RequestInfo], None] | None = None
    on_retry: Callable[[RetryInfo], None] | None = None
    on_success: Callable[[ResponseInfo], None] | None = None
    on_failure: Callable[[FailureInfo], None] | None = None

    def __post_init__(self) -> None:
        validate_retry_params(max_retries=self.max_retries, delay=self.delay)

    def merge(self, **overrides: Any) -> ContextConfig:
        """Create a new config with specified parameters overridden.

        Only non-None override values are applied.

        Args:
            **overrides: Keyword arguments for parameters to override.

        Returns:
            A new, validated ContextConfig instance.
        """
        filtered_overrides = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **filtered_overrides)

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary format.

        Returns:
            Dictionary with the configuration parameters.

        Example:
            ```pycon
            >>> from apicontext.core.config import ContextConfig
            >>> ContextConfig(retry=True, max_retries=2).to_dict()["max_retries"]
            2

            ```
        """
        return {
            "retry": self.retry,
            "max_retries": self.max_retries,
            "delay": self.delay,
            "on_request": self.on_request,
            "on_retry": self.on_retry,
            "on_success": self.on_success,
            "on_failure": self.on_failure,
        }
