r"""Unit tests for ApiContext."""

from __future__ import annotations

from unittest.mock import Mock, call

import pytest

from apicontext import (
    ApiContext,
    AsyncCommunicator,
    Communicator,
    CommunicatorResponse,
    InvalidContextStateError,
    UnsupportedHttpStatusError,
)
from apicontext.context import resolve_send
from apicontext.core import ContextConfig


def make_context(communicator: object, retry: bool = True, max_retries: int = 3) -> ApiContext:
    builder = ApiContext.builder().of(communicator).with_retry_count(max_retries)
    if retry:
        builder.with_retry().with_delay_on_retry(5)
    return builder.build()


##################################
#     Tests for resolve_send     #
##################################


def test_resolve_send_communicator(mock_communicator: Mock) -> None:
    assert resolve_send(mock_communicator) is mock_communicator.send


def test_resolve_send_callable() -> None:
    def send() -> CommunicatorResponse:
        return CommunicatorResponse(200)

    assert resolve_send(send) is send


def test_resolve_send_none_raises() -> None:
    with pytest.raises(InvalidContextStateError, match=r"communicator is required"):
        resolve_send(None)


def test_resolve_send_invalid_raises() -> None:
    with pytest.raises(TypeError, match=r"must define send\(\) or be callable, got int"):
        resolve_send(42)


################################
#     Tests for ApiContext     #
################################


def test_api_context_none_communicator_raises() -> None:
    with pytest.raises(InvalidContextStateError):
        ApiContext(None)


def test_api_context_default_config(mock_communicator: Mock) -> None:
    context = ApiContext(mock_communicator)
    assert context.config == ContextConfig()
    assert context.communicator is mock_communicator


def test_api_context_repr(mock_communicator: Mock) -> None:
    assert repr(ApiContext(mock_communicator)).startswith("ApiContext(communicator=")


def test_execute_first_attempt_success(mock_communicator: Mock, mock_sleep: Mock) -> None:
    """Test that a 200 OK on the first attempt returns the body."""
    assert make_context(mock_communicator).execute() == "ok"
    mock_communicator.send.assert_called_once_with()
    mock_sleep.assert_not_called()


def test_execute_retry_then_success(mock_sleep: Mock) -> None:
    """Test that a request timeout is retried until the call
    succeeds."""
    communicator = Mock(
        spec=Communicator,
        send=Mock(side_effect=[CommunicatorResponse(408), CommunicatorResponse(200, "body")]),
    )
    assert make_context(communicator).execute() == "body"
    assert communicator.send.call_count == 2
    mock_sleep.assert_called_once_with(5)


def test_execute_non_retryable_status(mock_sleep: Mock) -> None:
    """Test that a 404 returns None without retry."""
    communicator = Mock(
        spec=Communicator, send=Mock(return_value=CommunicatorResponse(404, "missing"))
    )
    assert make_context(communicator).execute() is None
    communicator.send.assert_called_once_with()
    mock_sleep.assert_not_called()


def test_execute_retry_disabled(mock_sleep: Mock) -> None:
    """Test that retryable statuses are not retried when retry is
    disabled."""
    communicator = Mock(spec=Communicator, send=Mock(return_value=CommunicatorResponse(500)))
    assert make_context(communicator, retry=False).execute() is None
    communicator.send.assert_called_once_with()
    mock_sleep.assert_not_called()


@pytest.mark.parametrize("max_retries", [0, 1, 2, 4])
def test_execute_attempt_count(mock_sleep: Mock, max_retries: int) -> None:
    """Test that a budget of N retries performs N + 1 attempts."""
    communicator = Mock(spec=Communicator, send=Mock(return_value=CommunicatorResponse(500)))
    assert make_context(communicator, max_retries=max_retries).execute() is None
    assert communicator.send.call_count == max_retries + 1
    assert mock_sleep.call_args_list == [call(5)] * max_retries


def test_execute_unsupported_status_raises(mock_sleep: Mock) -> None:
    communicator = Mock(spec=Communicator, send=Mock(return_value=CommunicatorResponse(429)))
    with pytest.raises(UnsupportedHttpStatusError) as exc_info:
        make_context(communicator).execute()
    assert exc_info.value.status_code == 429
    communicator.send.assert_called_once_with()
    mock_sleep.assert_not_called()


def test_execute_independent_calls(mock_sleep: Mock) -> None:
    """Test that the attempt counter is not shared between calls."""
    communicator = Mock(
        spec=Communicator,
        send=Mock(
            side_effect=[
                CommunicatorResponse(500),
                CommunicatorResponse(500),
                CommunicatorResponse(200, "first"),
                CommunicatorResponse(500),
                CommunicatorResponse(500),
                CommunicatorResponse(200, "second"),
            ]
        ),
    )
    context = make_context(communicator, max_retries=2)
    assert context.execute() == "first"
    assert context.execute() == "second"
    assert communicator.send.call_count == 6
    assert mock_sleep.call_count == 4


def test_execute_interrupted_wait_returns_none(mock_sleep: Mock) -> None:
    mock_sleep.side_effect = InterruptedError
    communicator = Mock(spec=Communicator, send=Mock(return_value=CommunicatorResponse(500)))
    assert make_context(communicator).execute() is None
    communicator.send.assert_called_once_with()


def test_execute_callable_communicator(mock_sleep: Mock) -> None:
    responses = iter([CommunicatorResponse(408), CommunicatorResponse(200, "done")])
    context = ApiContext(
        lambda: next(responses), config=ContextConfig(retry=True, max_retries=1, delay=0)
    )
    assert context.execute() == "done"
    mock_sleep.assert_called_once_with(0)


def test_execute_communicator_subclass(mock_sleep: Mock) -> None:
    class CountingCommunicator(Communicator):
        def __init__(self) -> None:
            self.calls = 0

        def send(self) -> CommunicatorResponse:
            self.calls += 1
            return CommunicatorResponse(200, self.create_request_parameter({"n": self.calls}))

    communicator = CountingCommunicator()
    context = ApiContext(communicator)
    assert context.execute() == "n=1"
    assert context.execute() == "n=2"
    mock_sleep.assert_not_called()


def test_execute_success_callback(mock_communicator: Mock, mock_callback: Mock) -> None:
    context = ApiContext.builder().of(mock_communicator).with_callbacks(on_success=mock_callback)
    assert context.build().execute() == "ok"
    assert mock_callback.call_args.args[0].body == "ok"


def test_api_context_coroutine_function_raises() -> None:
    """Test that an asynchronous communicator is rejected before any
    call is made."""

    async def send() -> CommunicatorResponse:
        return CommunicatorResponse(200, "ok")

    with pytest.raises(TypeError, match=r"use AsyncApiContext instead"):
        ApiContext(send)


def test_api_context_async_communicator_raises() -> None:
    class AsyncEcho(AsyncCommunicator):
        async def send(self) -> CommunicatorResponse:
            return CommunicatorResponse(200, "ok")

    with pytest.raises(TypeError, match=r"needs a synchronous communicator"):
        ApiContext.builder().of(AsyncEcho()).with_retry().build()
