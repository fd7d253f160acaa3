"""
ScalePadClient - Main SDK class for the ScalePad API.

This module contains the ScalePadClient class which wires configuration,
logging, the HTTP client and the resource namespaces together.
"""

from typing import Optional

from .api.core_v1 import Core
from .errors import ConfigurationError
from .models.config import RetryConfig, ScalePadClientConfig
from .services.logger import Logger, create_logger
from .utils.config_loader import load_config
from .utils.http_client import HttpClient


class ScalePadClient:
    """
    Main client for interacting with the ScalePad API.

    Example:
        >>> async with ScalePadClient(ScalePadClientConfig(api_key="...")) as client:
        ...     async for ticket in client.core.v1.tickets.paginate_items(page_size=100):
        ...         print(ticket)
    """

    def __init__(self, config: ScalePadClientConfig):
        """Initialize ScalePadClient with configuration.

        Raises:
            ConfigurationError: If the API key is missing
        """
        if not config.api_key:
            raise ConfigurationError("API key is required")

        self.config = config
        self.logger: Logger = create_logger(config.log_level, config.logger)
        self.retry: RetryConfig = config.resolved_retry()
        self.http_client = HttpClient(
            api_key=config.api_key,
            base_url=config.base_url,
            timeout_ms=config.timeout_ms,
            retry=self.retry,
            logger=self.logger,
            transport=config.transport,
        )
        self.core = Core(self.http_client, self.logger)

    @classmethod
    def from_env(cls, config: Optional[ScalePadClientConfig] = None) -> "ScalePadClient":
        """Create a client from environment variables (see ``load_config``)."""
        return cls(config or load_config())

    def get_logger(self) -> Logger:
        """Get the logger instance."""
        return self.logger

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self.http_client.close()

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()
