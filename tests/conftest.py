from __future__ import annotations

from typing import TYPE_CHECKING
from unittest.mock import AsyncMock, Mock, patch

import pytest

from apicontext import AsyncCommunicator, Communicator, CommunicatorResponse

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture
def mock_sleep() -> Generator[Mock, None, None]:
    """Patch time.sleep to make tests run faster."""
    with patch("time.sleep", return_value=None) as mock:
        yield mock


@pytest.fixture
def mock_asleep() -> Generator[Mock, None, None]:
    """Patch asyncio.sleep to make tests run faster."""
    with patch("asyncio.sleep", return_value=None) as mock:
        yield mock


@pytest.fixture
def ok_response() -> CommunicatorResponse:
    """Create a successful communicator response."""
    return CommunicatorResponse(status_code=200, body="ok")


@pytest.fixture
def mock_communicator(ok_response: CommunicatorResponse) -> Mock:
    """Create a mock communicator returning 200 OK."""
    return Mock(spec=Communicator, send=Mock(return_value=ok_response))


@pytest.fixture
def mock_async_communicator(ok_response: CommunicatorResponse) -> Mock:
    """Create a mock async communicator returning 200 OK."""
    return Mock(spec=AsyncCommunicator, send=AsyncMock(return_value=ok_response))


@pytest.fixture
def mock_callback() -> Mock:
    """Create a mock callback function for testing callbacks."""
    return Mock()
