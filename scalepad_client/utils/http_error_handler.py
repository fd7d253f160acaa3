"""HTTP error handler utilities for HttpClient.

This module maps raw HTTP outcomes onto the SDK's request error taxonomy:
non-2xx responses become ApiError, AuthenticationError or RateLimitError,
and transport failures become NetworkError or TimeoutError.
"""

import json
from typing import Any, List, Optional

import httpx
from pydantic import ValidationError

from ..errors import (
    ApiError,
    AuthenticationError,
    NetworkError,
    RateLimitError,
    RequestError,
    TimeoutError,
)
from ..models.error_response import ErrorItem, ErrorResponse


def parse_retry_after(header: Optional[str]) -> Optional[int]:
    """Parse a Retry-After header as an integer count of seconds.

    Args:
        header: Raw header value (optional)

    Returns:
        Seconds to wait, or None if the header is absent or unparseable

    Examples:
        >>> parse_retry_after("5")
        5
        >>> parse_retry_after("Wed, 21 Oct 2015 07:28:00 GMT") is None
        True

    """
    if header is None:
        return None
    try:
        seconds = int(header.strip())
    except ValueError:
        return None
    return seconds if seconds >= 0 else None


def _body_as_text(body: Any) -> str:
    if isinstance(body, str):
        return body
    return json.dumps(body)


def parse_error_items(status_code: int, body: Any) -> List[ErrorItem]:
    """Extract error items from an error response body.

    Falls back to a single synthetic item when the body does not match the
    ``{"errors": [...]}`` envelope.

    Args:
        status_code: HTTP status code
        body: Parsed response body (any JSON value, or None)

    Returns:
        Non-empty list of ErrorItem

    """
    try:
        return ErrorResponse.model_validate(body).errors
    except ValidationError:
        return [
            ErrorItem(
                code=f"HTTP_{status_code}",
                title=f"HTTP {status_code} error",
                detail=_body_as_text(body),
            )
        ]


def classify(
    status_code: int, body: Any, retry_after_header: Optional[str] = None
) -> RequestError:
    """Create the request error matching a non-2xx response.

    Args:
        status_code: HTTP status code
        body: Parsed response body (any JSON value, or None)
        retry_after_header: Raw Retry-After header value (optional)

    Returns:
        AuthenticationError for 401, RateLimitError for 429, ApiError otherwise

    Examples:
        >>> classify(429, None, "5").retry_after
        5

    """
    errors = parse_error_items(status_code, body)
    if status_code == 401:
        return AuthenticationError(errors)
    if status_code == 429:
        return RateLimitError(errors, retry_after=parse_retry_after(retry_after_header))
    return ApiError(status_code, errors)


def classify_transport_error(error: Exception, timeout_ms: int) -> RequestError:
    """Create the request error matching a transport-level failure.

    Args:
        error: Exception raised by httpx before a response was received
        timeout_ms: Configured per-attempt timeout

    Returns:
        TimeoutError for httpx timeouts, NetworkError otherwise

    """
    if isinstance(error, httpx.TimeoutException):
        return TimeoutError(timeout_ms)
    return NetworkError(f"Network request failed: {error}", cause=error)


def read_error_body(response: httpx.Response) -> Any:
    """Best-effort JSON parse of an error response body.

    Args:
        response: HTTP response object

    Returns:
        Parsed JSON value, or None if the body is empty or not JSON

    """
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return None
