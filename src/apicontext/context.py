r"""Retrying execution context of an API call.

``ApiContext`` wraps a communicator and a retry configuration. Each call
to ``execute`` sends the request, classifies the status code against the
status catalog, and retries request timeouts and internal server errors
while the retry budget lasts.
"""

from __future__ import annotations

__all__ = ["ApiContext"]

import inspect
from typing import TYPE_CHECKING, Any

from apicontext.builder import ContextBuilder
from apicontext.core.config import ContextConfig
from apicontext.core.validation import validate_communicator
from apicontext.retry.executor import RetryExecutor

if TYPE_CHECKING:
    from collections.abc import Callable

    from apicontext.communicator import Communicator


def resolve_send(communicator: Any) -> Callable[[], Any]:
    r"""Return the function performing one attempt of a communicator.

    Args:
        communicator: An object with a ``send`` method, or a callable
            taking no argument.

    Returns:
        The ``send`` method, or the callable itself.

    Raises:
        InvalidContextStateError: If communicator is None.
        TypeError: If communicator has no ``send`` method and is not
            callable.
    """
    validate_communicator(communicator)
    send = getattr(communicator, "send", None)
    if callable(send):
        return send
    if callable(communicator):
        return communicator
    msg = f"communicator must define send() or be callable, got {type(communicator).__qualname__}"
    raise TypeError(msg)


class ApiContext:
    r"""Execute API calls through a communicator with bounded retries.

    A successful call (status ``200 OK``) returns the response body. A
    call that ends on any other status of the catalog returns ``None``:
    either because retry is disabled, because the status is not retryable,
    or because the retry budget is exhausted. A status code that is not in
    the catalog raises ``UnsupportedHttpStatusError`` and is never retried.

    The attempt counter is local to each ``execute`` call, so a context can
    be reused for independent calls.

    Args:
        communicator: The communicator performing the network call.
        config: Optional retry configuration. Defaults to no retry.

    Raises:
        InvalidContextStateError: If communicator is None.
        TypeError: If the communicator is asynchronous.

    Example:
        ```pycon
        >>> from apicontext import ApiContext, CommunicatorResponse
        >>> from apicontext.core import ContextConfig
        >>> responses = iter([CommunicatorResponse(408), CommunicatorResponse(200, "done")])
        >>> context = ApiContext(
        ...     lambda: next(responses), config=ContextConfig(retry=True, max_retries=2, delay=0)
        ... )
        >>> context.execute()
        'done'

        ```
    """

    def __init__(
        self,
        communicator: Communicator | Callable[[], Any],
        *,
        config: ContextConfig | None = None,
    ) -> None:
        self._send = resolve_send(communicator)
        if inspect.iscoroutinefunction(self._send):
            msg = "ApiContext needs a synchronous communicator, use AsyncApiContext instead"
            raise TypeError(msg)
        self._communicator = communicator
        self._config = config or ContextConfig()
        self._executor = RetryExecutor(self._config)

    @classmethod
    def builder(cls) -> ContextBuilder[ApiContext]:
        r"""Return a fluent builder of ``ApiContext``.

        Example:
            ```pycon
            >>> from apicontext import ApiContext, CommunicatorResponse
            >>> context = ApiContext.builder().of(lambda: CommunicatorResponse(200, "ok")).build()
            >>> context.execute()
            'ok'

            ```
        """
        return ContextBuilder(cls)

    @property
    def communicator(self) -> Communicator | Callable[[], Any]:
        return self._communicator

    @property
    def config(self) -> ContextConfig:
        return self._config

    def execute(self) -> str | None:
        r"""Execute the API call.

        Returns:
            The response body if the call succeeded, otherwise ``None``.

        Raises:
            UnsupportedHttpStatusError: If the communicator returned a
                status code that is not in the status catalog.
        """
        return self._executor.execute(self._send)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(communicator={self._communicator!r}, "
            f"policy={self._executor.policy!r})"
        )
