"""
Configuration loader utility.

Automatically loads environment variables with sensible defaults.
"""

import logging
import os
from typing import Any, Dict, Optional

from dotenv import load_dotenv

from ..errors import ConfigurationError
from ..models.config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT_MS, ScalePadClientConfig

logger = logging.getLogger(__name__)

_LOG_LEVELS = ("debug", "info", "warn", "error", "none")


def _parse_int(name: str, default: Optional[int] = None) -> Optional[int]:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}")


def _parse_bool(name: str) -> Optional[bool]:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return None
    value = raw.strip().lower()
    if value in ("1", "true", "yes", "on"):
        return True
    if value in ("0", "false", "no", "off"):
        return False
    raise ConfigurationError(f"{name} must be a boolean, got {raw!r}")


def load_config() -> ScalePadClientConfig:
    """
    Load configuration from environment variables with defaults.

    Required environment variables:
    - SCALEPAD_API_KEY

    Optional environment variables:
    - SCALEPAD_BASE_URL (default: https://api.scalepad.com)
    - SCALEPAD_TIMEOUT_MS (default: 60000)
    - SCALEPAD_LOG_LEVEL (debug, info, warn, error, none)
    - SCALEPAD_MAX_RETRIES (default: 3)
    - SCALEPAD_RETRY_ON_429 (default: true)
    - SCALEPAD_RETRY_ON_5XX (default: true)

    Returns:
        ScalePadClientConfig instance

    Raises:
        ConfigurationError: If required environment variables are missing or invalid
    """
    load_dotenv()

    api_key = os.environ.get("SCALEPAD_API_KEY") or ""
    if not api_key:
        raise ConfigurationError("SCALEPAD_API_KEY environment variable is required")

    base_url = os.environ.get("SCALEPAD_BASE_URL") or DEFAULT_BASE_URL

    timeout_ms = _parse_int("SCALEPAD_TIMEOUT_MS", DEFAULT_TIMEOUT_MS)
    if timeout_ms is None or timeout_ms <= 0:
        raise ConfigurationError("SCALEPAD_TIMEOUT_MS must be a positive integer")

    log_level = os.environ.get("SCALEPAD_LOG_LEVEL", "info")
    if log_level not in _LOG_LEVELS:
        logger.debug(f"Ignoring unknown SCALEPAD_LOG_LEVEL {log_level!r}")
        log_level = "info"

    retry: Dict[str, Any] = {}
    max_retries = _parse_int("SCALEPAD_MAX_RETRIES")
    if max_retries is not None:
        if max_retries < 0:
            raise ConfigurationError("SCALEPAD_MAX_RETRIES must not be negative")
        retry["max_retries"] = max_retries
    retry_on_429 = _parse_bool("SCALEPAD_RETRY_ON_429")
    if retry_on_429 is not None:
        retry["retry_on_429"] = retry_on_429
    retry_on_5xx = _parse_bool("SCALEPAD_RETRY_ON_5XX")
    if retry_on_5xx is not None:
        retry["retry_on_5xx"] = retry_on_5xx

    return ScalePadClientConfig(
        api_key=api_key,
        base_url=base_url,
        timeout_ms=timeout_ms,
        retry=retry or None,
        log_level=log_level,  # type: ignore[arg-type]
    )
