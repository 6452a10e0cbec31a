r"""Configuration and validation shared by the sync and async
contexts."""

from __future__ import annotations

__all__ = [
    "DEFAULT_DELAY",
    "DEFAULT_MAX_RETRIES",
    "DEFAULT_TIMEOUT",
    "RETRYABLE_STATUSES",
    "ContextConfig",
    "validate_communicator",
    "validate_retry_params",
    "validate_timeout",
]

from apicontext.core.config import (
    DEFAULT_DELAY,
    DEFAULT_MAX_RETRIES,
    DEFAULT_TIMEOUT,
    RETRYABLE_STATUSES,
    ContextConfig,
)
from apicontext.core.validation import (
    validate_communicator,
    validate_retry_params,
    validate_timeout,
)
