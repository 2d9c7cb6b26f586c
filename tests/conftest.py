"""
Global pytest fixtures and configuration for test suite.

This module provides reusable fixtures for:
- A fixed clock for deterministic headers
- Mocked HTTP clients
- Temporary dat files
"""

from datetime import datetime, timezone
from typing import Callable, Optional

import httpx
import pytest

from tests.fixtures.clock import FixedClock
from tests.fixtures.dat_files import EXISTING_DATA, FIXED_UNIX_TIME


@pytest.fixture
def fixed_timestamp() -> datetime:
    """
    Provide fixed timestamp for deterministic testing.

    Returns:
        2021-02-10T00:24:14Z
    """
    return datetime.fromtimestamp(FIXED_UNIX_TIME, tz=timezone.utc)


@pytest.fixture
def fixed_clock(fixed_timestamp) -> FixedClock:
    """Clock frozen at fixed_timestamp."""
    return FixedClock(fixed_timestamp)


@pytest.fixture
def mock_http_client() -> Callable[..., httpx.Client]:
    """
    Factory for httpx clients answering every request with a canned response.

    The returned client records requested URLs in its `requested_urls` list.

    Usage:
        client = mock_http_client(b'{"gTLDs": []}', status_code=200)
    """
    clients = []

    def factory(
        body: bytes = b"",
        status_code: int = 200,
        error: Optional[Exception] = None,
    ) -> httpx.Client:
        requested_urls = []

        def handler(request: httpx.Request) -> httpx.Response:
            requested_urls.append(str(request.url))
            if error is not None:
                raise error
            return httpx.Response(status_code, content=body)

        client = httpx.Client(transport=httpx.MockTransport(handler))
        client.requested_urls = requested_urls
        clients.append(client)
        return client

    yield factory

    for client in clients:
        client.close()


@pytest.fixture
def tmp_dat_file(tmp_path) -> str:
    """
    Create a temporary dat file holding EXISTING_DATA.

    Returns:
        Path to the dat file
    """
    dat_path = tmp_path / "public_suffix_list.dat"
    dat_path.write_bytes(EXISTING_DATA.encode("utf-8"))
    return str(dat_path)


def pytest_configure(config):
    """
    Configure pytest with custom markers.
    """
    config.addinivalue_line(
        "markers", "unit: Unit tests (fast, no external dependencies)"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests (CLI, end-to-end)"
    )
