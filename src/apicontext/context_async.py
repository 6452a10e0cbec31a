r"""Asynchronous retrying execution context of an API call."""

from __future__ import annotations

__all__ = ["AsyncApiContext"]

from typing import TYPE_CHECKING, Any

from apicontext.builder import ContextBuilder
from apicontext.context import resolve_send
from apicontext.core.config import ContextConfig
from apicontext.retry.executor_async import AsyncRetryExecutor

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from apicontext.communicator import AsyncCommunicator


class AsyncApiContext:
    r"""Asynchronous twin of ``ApiContext``.

    The communicator's ``send`` is awaited and the wait between two
    attempts uses ``asyncio.sleep``, so other tasks keep running while a
    call waits for its next attempt.

    Args:
        communicator: The asynchronous communicator, or a coroutine
            function taking no argument.
        config: Optional retry configuration. Defaults to no retry.

    Raises:
        InvalidContextStateError: If communicator is None.

    Example:
        ```pycon
        >>> import asyncio
        >>> from apicontext import AsyncApiContext, CommunicatorResponse
        >>> async def send() -> CommunicatorResponse:
        ...     return CommunicatorResponse(200, "ok")
        ...
        >>> asyncio.run(AsyncApiContext.builder().of(send).build().execute())
        'ok'

        ```
    """

    def __init__(
        self,
        communicator: AsyncCommunicator | Callable[[], Awaitable[Any]],
        *,
        config: ContextConfig | None = None,
    ) -> None:
        self._send = resolve_send(communicator)
        self._communicator = communicator
        self._config = config or ContextConfig()
        self._executor = AsyncRetryExecutor(self._config)

    @classmethod
    def builder(cls) -> ContextBuilder[AsyncApiContext]:
        r"""Return a fluent builder of ``AsyncApiContext``."""
        return ContextBuilder(cls)

    @property
    def communicator(self) -> AsyncCommunicator | Callable[[], Awaitable[Any]]:
        return self._communicator

    @property
    def config(self) -> ContextConfig:
        return self._config

    async def execute(self) -> str | None:
        r"""Execute the API call.

        Returns:
            The response body if the call succeeded, otherwise ``None``.

        Raises:
            UnsupportedHttpStatusError: If the communicator returned a
                status code that is not in the status catalog.
        """
        return await self._executor.execute(self._send)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(communicator={self._communicator!r}, "
            f"policy={self._executor.policy!r})"
        )
