r"""Fluent builder for API contexts.

The builder collects the communicator and the retry settings, and
validates them as soon as they are given, so that an invalid delay is
reported when the context is built rather than when a retry happens.
"""

from __future__ import annotations

__all__ = ["ContextBuilder"]

from typing import TYPE_CHECKING, Any, Generic, TypeVar

from apicontext.core.config import DEFAULT_DELAY, DEFAULT_MAX_RETRIES, ContextConfig
from apicontext.core.validation import validate_communicator, validate_retry_params

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Self

T = TypeVar("T")


class ContextBuilder(Generic[T]):
    r"""Fluent builder of ``ApiContext`` and ``AsyncApiContext``.

    Use ``ApiContext.builder()`` or ``AsyncApiContext.builder()`` rather
    than instantiating this class directly.

    Args:
        factory: The callable building the context from a communicator
            and a ``ContextConfig``.

    Example:
        ```pycon
        >>> from apicontext import ApiContext, CommunicatorResponse
        >>> context = (
        ...     ApiContext.builder()
        ...     .of(lambda: CommunicatorResponse(200, "ok"))
        ...     .with_retry()
        ...     .with_retry_count(2)
        ...     .with_delay_on_retry(0.5)
        ...     .build()
        ... )
        >>> context.config.max_retries, context.config.delay
        (2, 0.5)

        ```
    """

    def __init__(self, factory: Callable[..., T]) -> None:
        self._factory = factory
        self._communicator: Any = None
        self._retry = False
        self._max_retries = DEFAULT_MAX_RETRIES
        self._delay = DEFAULT_DELAY
        self._callbacks: dict[str, Callable | None] = {}

    def of(self, communicator: Any) -> Self:
        r"""Set the communicator performing the network call.

        Raises:
            InvalidContextStateError: If communicator is None.
        """
        validate_communicator(communicator)
        self._communicator = communicator
        return self

    def with_retry(self) -> Self:
        r"""Enable retries of transient failures."""
        self._retry = True
        return self

    def with_retry_count(self, max_retries: int) -> Self:
        r"""Set the maximum number of retries after the initial attempt.

        Raises:
            InvalidContextStateError: If max_retries is negative.
        """
        validate_retry_params(max_retries=max_retries, delay=self._delay)
        self._max_retries = max_retries
        return self

    def with_delay_on_retry(self, delay: float) -> Self:
        r"""Set the wait in seconds between two attempts (default: 5).

        Raises:
            InvalidContextStateError: If delay is negative.
        """
        validate_retry_params(max_retries=self._max_retries, delay=delay)
        self._delay = delay
        return self

    def with_callbacks(
        self,
        *,
        on_request: Callable | None = None,
        on_retry: Callable | None = None,
        on_success: Callable | None = None,
        on_failure: Callable | None = None,
    ) -> Self:
        r"""Set the lifecycle callbacks. See ``apicontext.callbacks``."""
        self._callbacks = {
            "on_request": on_request,
            "on_retry": on_retry,
            "on_success": on_success,
            "on_failure": on_failure,
        }
        return self

    def build(self) -> T:
        r"""Build the context.

        Returns:
            A new context using the configured communicator and settings.

        Raises:
            InvalidContextStateError: If no communicator was set.
        """
        validate_communicator(self._communicator)
        config = ContextConfig(
            retry=self._retry,
            max_retries=self._max_retries,
            delay=self._delay,
            **self._callbacks,
        )
        return self._factory(self._communicator, config=config)
