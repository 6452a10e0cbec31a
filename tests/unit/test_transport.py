r"""Unit tests for the httpx backed communicators."""

from __future__ import annotations

from dataclasses import dataclass
from unittest.mock import Mock
from urllib.parse import parse_qsl

import httpx
import pytest

from apicontext import (
    ApiContext,
    AsyncApiContext,
    CommunicatorResponse,
    ContentType,
    HttpMethod,
    RequestParameter,
    parameter,
)
from apicontext.transport import (
    FORM_CONTENT_TYPE,
    AsyncHttpxCommunicator,
    HttpxCommunicator,
    build_request_kwargs,
)

TEST_URL = "https://api.example.com/data"


@dataclass
class UserParameter(RequestParameter):
    user_id: str = parameter(alias="userId")
    name: str | None = None


class RecordingHandler:
    r"""Handler of ``httpx.MockTransport`` recording the requests."""

    def __init__(self, *responses: httpx.Response) -> None:
        self.requests: list[httpx.Request] = []
        self._responses = list(responses) or [httpx.Response(200, text="ok")]

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if len(self._responses) > 1:
            return self._responses.pop(0)
        return self._responses[0]


##########################################
#     Tests for build_request_kwargs     #
##########################################


def test_build_request_kwargs_without_parameter() -> None:
    communicator = HttpxCommunicator(TEST_URL, client=Mock())
    assert build_request_kwargs(communicator) == {"headers": {}}


def test_build_request_kwargs_query() -> None:
    communicator = HttpxCommunicator(
        TEST_URL, parameter=UserParameter(user_id="42", name="Jo Doe"), client=Mock()
    )
    assert build_request_kwargs(communicator) == {
        "headers": {},
        "url": f"{TEST_URL}?userId=42&name=Jo+Doe",
    }


def test_build_request_kwargs_query_existing_query_string() -> None:
    communicator = HttpxCommunicator(f"{TEST_URL}?v=1", parameter={"page": 2}, client=Mock())
    assert build_request_kwargs(communicator)["url"] == f"{TEST_URL}?v=1&page=2"


def test_build_request_kwargs_empty_encoding() -> None:
    communicator = HttpxCommunicator(TEST_URL, parameter={"page": None}, client=Mock())
    assert build_request_kwargs(communicator) == {"headers": {}}


@pytest.mark.parametrize("method", [HttpMethod.POST, HttpMethod.PUT, HttpMethod.PATCH])
def test_build_request_kwargs_body(method: HttpMethod) -> None:
    communicator = HttpxCommunicator(
        TEST_URL, method, parameter=UserParameter(user_id="42"), client=Mock()
    )
    assert build_request_kwargs(communicator) == {
        "headers": {"Content-Type": FORM_CONTENT_TYPE},
        "content": b"userId=42",
    }


def test_build_request_kwargs_accept_header() -> None:
    communicator = HttpxCommunicator(TEST_URL, accept=ContentType.JSON, client=Mock())
    assert build_request_kwargs(communicator) == {"headers": {"Accept": "application/json"}}


def test_build_request_kwargs_explicit_headers_win() -> None:
    communicator = HttpxCommunicator(
        TEST_URL,
        "post",
        parameter={"a": "b"},
        accept=ContentType.JSON,
        headers={"Accept": "text/plain", "Content-Type": "text/plain"},
        client=Mock(),
    )
    assert build_request_kwargs(communicator)["headers"] == {
        "Accept": "text/plain",
        "Content-Type": "text/plain",
    }


#######################################
#     Tests for HttpxCommunicator     #
#######################################


def test_httpx_communicator_method_from_name() -> None:
    assert HttpxCommunicator(TEST_URL, "delete", client=Mock()).method is HttpMethod.DELETE


def test_httpx_communicator_invalid_method_raises() -> None:
    with pytest.raises(ValueError, match=r"unsupported HTTP method: 'TRACE'"):
        HttpxCommunicator(TEST_URL, "TRACE", client=Mock())


@pytest.mark.parametrize("timeout", [0, -1.0])
def test_httpx_communicator_invalid_timeout_raises(timeout: float) -> None:
    with pytest.raises(ValueError, match=r"timeout must be > 0"):
        HttpxCommunicator(TEST_URL, timeout=timeout)


def test_httpx_communicator_send_get() -> None:
    handler = RecordingHandler(httpx.Response(200, text="pong"))
    client = httpx.Client(transport=httpx.MockTransport(handler))
    communicator = HttpxCommunicator(
        TEST_URL, parameter=UserParameter(user_id="a&b"), accept=ContentType.JSON, client=client
    )
    assert communicator.send() == CommunicatorResponse(200, "pong")
    request = handler.requests[0]
    assert request.method == "GET"
    assert parse_qsl(request.url.query.decode()) == [("userId", "a&b")]
    assert request.headers["Accept"] == "application/json"


def test_httpx_communicator_send_post() -> None:
    handler = RecordingHandler(httpx.Response(201, text="created"))
    client = httpx.Client(transport=httpx.MockTransport(handler))
    communicator = HttpxCommunicator(
        TEST_URL, HttpMethod.POST, parameter={"name": "José"}, client=client
    )
    assert communicator.send() == CommunicatorResponse(201, "created")
    request = handler.requests[0]
    assert request.method == "POST"
    assert request.url == TEST_URL
    assert request.content == b"name=Jos%C3%A9"
    assert request.headers["Content-Type"] == FORM_CONTENT_TYPE


def test_httpx_communicator_close_owned_client() -> None:
    communicator = HttpxCommunicator(TEST_URL)
    with communicator:
        pass
    assert communicator._client.is_closed


def test_httpx_communicator_keeps_external_client_open() -> None:
    client = httpx.Client(transport=httpx.MockTransport(RecordingHandler()))
    with HttpxCommunicator(TEST_URL, client=client):
        pass
    assert not client.is_closed
    client.close()


def test_httpx_communicator_with_api_context(mock_sleep: Mock) -> None:
    """Test a full call retrying an internal server error."""
    handler = RecordingHandler(httpx.Response(500), httpx.Response(200, text="recovered"))
    client = httpx.Client(transport=httpx.MockTransport(handler))
    context = (
        ApiContext.builder()
        .of(HttpxCommunicator(TEST_URL, parameter={"q": "x"}, client=client))
        .with_retry()
        .with_retry_count(2)
        .with_delay_on_retry(1)
        .build()
    )
    assert context.execute() == "recovered"
    assert len(handler.requests) == 2
    mock_sleep.assert_called_once_with(1)


############################################
#     Tests for AsyncHttpxCommunicator     #
############################################


@pytest.mark.asyncio
async def test_async_httpx_communicator_send() -> None:
    handler = RecordingHandler(httpx.Response(200, text="async pong"))
    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
        communicator = AsyncHttpxCommunicator(
            TEST_URL, HttpMethod.PUT, parameter=UserParameter(user_id="7"), client=client
        )
        assert await communicator.send() == CommunicatorResponse(200, "async pong")
    assert handler.requests[0].method == "PUT"
    assert handler.requests[0].content == b"userId=7"


@pytest.mark.asyncio
async def test_async_httpx_communicator_close_owned_client() -> None:
    async with AsyncHttpxCommunicator(TEST_URL) as communicator:
        pass
    assert communicator._client.is_closed


@pytest.mark.asyncio
async def test_async_httpx_communicator_with_api_context(mock_asleep: Mock) -> None:
    handler = RecordingHandler(httpx.Response(408), httpx.Response(404, text="missing"))
    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
        context = (
            AsyncApiContext.builder()
            .of(AsyncHttpxCommunicator(TEST_URL, client=client))
            .with_retry()
            .with_retry_count(3)
            .with_delay_on_retry(0)
            .build()
        )
        assert await context.execute() is None
    assert len(handler.requests) == 2
    mock_asleep.assert_called_once_with(0)
