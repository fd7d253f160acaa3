"""
Shared pytest fixtures for ScalePad SDK tests.
"""

from typing import Callable
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest

from scalepad_client import ScalePadClientConfig
from scalepad_client.models.config import RetryConfig
from scalepad_client.services.logger import NoOpLogger
from scalepad_client.utils.http_client import HttpClient

TEST_API_KEY = "0123abcd-0123abcd-0123abcd-0123abcd"
TEST_BASE_URL = "https://api.scalepad.test"


@pytest.fixture
def config():
    """Test configuration."""
    return ScalePadClientConfig(
        api_key=TEST_API_KEY,
        base_url=TEST_BASE_URL,
        timeout_ms=5000,
        log_level="none",
    )


@pytest.fixture
def retry_config():
    """Retry policy with the default limits."""
    return RetryConfig(max_retries=3, retry_on_429=True, retry_on_5xx=True)


@pytest.fixture
def logger():
    """Logger that discards everything."""
    return NoOpLogger()


@pytest.fixture
def mock_logger():
    """Mock logger recording every call."""
    return MagicMock(spec=NoOpLogger)


@pytest.fixture
def make_http_client(retry_config, logger) -> Callable[..., HttpClient]:
    """Factory building an HttpClient backed by an httpx.MockTransport."""

    def factory(handler, timeout_ms: int = 5000, retry: RetryConfig = retry_config) -> HttpClient:
        return HttpClient(
            api_key=TEST_API_KEY,
            base_url=TEST_BASE_URL,
            timeout_ms=timeout_ms,
            retry=retry,
            logger=logger,
            transport=httpx.MockTransport(handler),
        )

    return factory


@pytest.fixture
def mock_http_client():
    """Mock HTTP client."""
    http_client = MagicMock(spec=HttpClient)
    http_client.get = AsyncMock(return_value={})
    http_client.post = AsyncMock(return_value={})
    http_client.patch = AsyncMock(return_value={})
    http_client.delete = AsyncMock(return_value=None)
    http_client.request = AsyncMock(return_value={})
    http_client.close = AsyncMock()
    return http_client
