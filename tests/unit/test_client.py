"""
Unit tests for ScalePadClient.
"""

import os
from unittest.mock import MagicMock, patch

import httpx
import pytest

from scalepad_client import (
    ApiError,
    ConfigurationError,
    ListResult,
    NoOpLogger,
    ScalePadClient,
    ScalePadClientConfig,
)
from scalepad_client.models.config import DEFAULT_RETRY_CONFIG
from scalepad_client.services.logger import LoggerService

TEST_API_KEY = "0123abcd-0123abcd-0123abcd-0123abcd"


class TestScalePadClient:
    """Test cases for ScalePadClient construction."""

    def test_init(self, config):
        """Test client initialization."""
        client = ScalePadClient(config)

        assert client.config is config
        assert client.retry == DEFAULT_RETRY_CONFIG
        assert isinstance(client.get_logger(), NoOpLogger)
        assert client.http_client.base_url == config.base_url
        assert client.http_client.timeout_ms == 5000
        assert client.core.v1.tickets.base_path == "/core/v1/tickets"

    def test_empty_api_key(self):
        """Test an empty API key is rejected."""
        with pytest.raises(ConfigurationError):
            ScalePadClient(ScalePadClientConfig(api_key=""))

    def test_retry_overrides_merged(self):
        """Test partial retry overrides keep other defaults."""
        client = ScalePadClient(ScalePadClientConfig(api_key="k", retry={"max_retries": 1}))

        assert client.retry.max_retries == 1
        assert client.retry.retry_on_429 is True
        assert client.retry.retry_on_5xx is True

    def test_default_log_level_uses_logger_service(self):
        """Test info level produces a LoggerService."""
        client = ScalePadClient(ScalePadClientConfig(api_key="k"))

        assert isinstance(client.get_logger(), LoggerService)

    def test_custom_logger(self):
        """Test a custom logger is used as-is."""
        custom = MagicMock(spec=NoOpLogger)
        client = ScalePadClient(ScalePadClientConfig(api_key="k", logger=custom))

        assert client.get_logger() is custom
        assert client.http_client.logger is custom

    def test_from_env(self):
        """Test building a client from the environment."""
        with patch("scalepad_client.utils.config_loader.load_dotenv"):
            with patch.dict(os.environ, {"SCALEPAD_API_KEY": "env-key"}, clear=True):
                client = ScalePadClient.from_env()

        assert client.config.api_key == "env-key"

    @pytest.mark.asyncio
    async def test_close(self, config):
        """Test closing the client closes the HTTP client."""
        client = ScalePadClient(config)
        with patch.object(client.http_client, "close") as mock_close:
            await client.close()

        mock_close.assert_awaited_once()


class TestScalePadClientEndToEnd:
    """End-to-end tests over a mock transport."""

    @pytest.mark.asyncio
    async def test_list_tickets(self):
        """Test listing tickets sends the encoded query."""
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(
                200, json={"data": [{"id": "t1"}], "total_count": 1, "next_cursor": None}
            )

        config = ScalePadClientConfig(
            api_key=TEST_API_KEY,
            base_url="https://api.scalepad.test",
            log_level="none",
            transport=httpx.MockTransport(handler),
        )
        async with ScalePadClient(config) as client:
            result = await client.core.v1.tickets.list(
                page_size=10,
                filters={"priority": {"op": "gte", "value": 3}},
                sort=["-created_at"],
            )

        assert isinstance(result, ListResult)
        assert result.data == [{"id": "t1"}]
        request = seen[0]
        assert request.url.path == "/core/v1/tickets"
        assert list(request.url.params.multi_items()) == [
            ("page_size", "10"),
            ("filter[priority]", "gte: 3"),
            ("sort", "-created_at"),
        ]
        assert request.headers["x-api-key"] == TEST_API_KEY

    @pytest.mark.asyncio
    async def test_collect_all_clients(self):
        """Test collecting every page of clients."""
        pages = {
            None: {"data": [{"id": "1"}], "total_count": 2, "next_cursor": "n1"},
            "n1": {"data": [{"id": "2"}], "total_count": 2, "next_cursor": None},
        }

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json=pages[request.url.params.get("cursor")])

        config = ScalePadClientConfig(
            api_key=TEST_API_KEY, log_level="none", transport=httpx.MockTransport(handler)
        )
        async with ScalePadClient(config) as client:
            clients = await client.core.v1.clients.collect_all()

        assert clients == [{"id": "1"}, {"id": "2"}]

    @pytest.mark.asyncio
    async def test_api_error_surfaces(self):
        """Test a 404 surfaces as ApiError."""
        body = {"errors": [{"code": "not_found", "title": "Not found"}]}
        config = ScalePadClientConfig(
            api_key=TEST_API_KEY,
            log_level="none",
            transport=httpx.MockTransport(lambda request: httpx.Response(404, json=body)),
        )
        async with ScalePadClient(config) as client:
            with pytest.raises(ApiError) as exc_info:
                await client.core.v1.contacts.get_by_id("missing")

        assert exc_info.value.status_code == 404
