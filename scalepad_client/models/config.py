"""
Configuration types for ScalePad SDK.

This module contains Pydantic models that define the client configuration
and the retry policy shared by every request of a client.
"""

from typing import Any, Dict, Literal, Optional

import httpx
from pydantic import BaseModel, ConfigDict, Field

LogLevel = Literal["debug", "info", "warn", "error", "none"]

DEFAULT_BASE_URL = "https://api.scalepad.com"
DEFAULT_TIMEOUT_MS = 60000
DEFAULT_BASE_DELAY_MS = 1000
DEFAULT_MAX_DELAY_MS = 30000


class RetryConfig(BaseModel):
    """Retry policy for a client.

    Immutable once built; merged from user overrides at client construction
    and shared read-only by every request.
    """

    model_config = ConfigDict(frozen=True)

    max_retries: int = Field(default=3, ge=0, description="Retries after the first attempt")
    retry_on_429: bool = Field(default=True, description="Retry rate-limited responses")
    retry_on_5xx: bool = Field(default=True, description="Retry 5xx server errors")
    base_delay_ms: int = Field(
        default=DEFAULT_BASE_DELAY_MS, ge=0, description="Backoff base delay in milliseconds"
    )
    max_delay_ms: int = Field(
        default=DEFAULT_MAX_DELAY_MS, ge=0, description="Backoff cap in milliseconds (before jitter)"
    )


DEFAULT_RETRY_CONFIG = RetryConfig()


class ScalePadClientConfig(BaseModel):
    """Main ScalePad client configuration.

    Required fields:
    - api_key: API key sent in the ``x-api-key`` header

    Optional fields:
    - base_url: API base URL (default: https://api.scalepad.com)
    - timeout_ms: Per-attempt timeout in milliseconds (default: 60000)
    - retry: Partial retry overrides merged onto DEFAULT_RETRY_CONFIG
    - log_level: Logging level (debug, info, warn, error, none)
    - logger: Custom logger exposing debug/info/warn/error
    - transport: Custom httpx transport (testing/special environments)
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    api_key: str = Field(..., description="API key for authentication")
    base_url: str = Field(default=DEFAULT_BASE_URL, description="API base URL")
    timeout_ms: int = Field(default=DEFAULT_TIMEOUT_MS, gt=0, description="Request timeout")
    retry: Optional[Dict[str, Any]] = Field(default=None, description="Retry overrides")
    log_level: LogLevel = Field(default="info", description="Log level")
    logger: Optional[Any] = Field(default=None, description="Custom logger instance")
    transport: Optional[httpx.AsyncBaseTransport] = Field(
        default=None, description="Custom httpx transport"
    )

    def resolved_retry(self) -> RetryConfig:
        """Get the effective retry policy (defaults overlaid with overrides)."""
        if not self.retry:
            return DEFAULT_RETRY_CONFIG
        return RetryConfig(**{**DEFAULT_RETRY_CONFIG.model_dump(), **self.retry})
