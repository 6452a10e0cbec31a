r"""Retry package implementing class-based composition pattern.

Public API:
    - RetryDecider: Logic for deciding whether to retry
    - RetryPolicy: Retry decision plus the wait before the next attempt
    - CallbackManager: Manager for callback invocations
    - RetryExecutor: Synchronous retry executor
    - AsyncRetryExecutor: Asynchronous retry executor
"""

from __future__ import annotations

__all__ = [
    "AsyncRetryExecutor",
    "CallbackManager",
    "RetryDecider",
    "RetryDecision",
    "RetryExecutor",
    "RetryPolicy",
]

from apicontext.retry.decider import RetryDecider
from apicontext.retry.executor import RetryExecutor
from apicontext.retry.executor_async import AsyncRetryExecutor
from apicontext.retry.manager import CallbackManager
from apicontext.retry.policy import RetryDecision, RetryPolicy
