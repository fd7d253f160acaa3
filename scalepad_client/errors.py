"""
SDK exceptions and error handling.

This module defines the exceptions raised by the ScalePad SDK. Request
failures form a closed taxonomy: every failure surfaced by a request method
is exactly one of the RequestError variants below, tagged with an ErrorKind
so callers (and the retry engine) can branch on ``error.kind``.
"""

from enum import Enum
from typing import Any, List, Optional

from .models.error_response import ErrorItem


class ErrorKind(str, Enum):
    """Tag identifying the variant of a request failure."""

    API = "api"
    AUTHENTICATION = "authentication"
    RATE_LIMIT = "rate_limit"
    RESPONSE_VALIDATION = "response_validation"
    NETWORK = "network"
    TIMEOUT = "timeout"


class ScalePadError(Exception):
    """Base exception for ScalePad SDK errors."""

    def __init__(self, message: str):
        """
        Initialize ScalePad error.

        Args:
            message: Error message
        """
        super().__init__(message)
        self.message = message


class ConfigurationError(ScalePadError):
    """Raised when client configuration is invalid."""

    pass


class RequestError(ScalePadError):
    """
    Base class of the request failure taxonomy.

    Attributes:
        kind: Variant tag
        status_code: HTTP status code where applicable
        errors: Non-empty list of error items describing the failure
    """

    kind: ErrorKind

    def __init__(
        self,
        message: str,
        errors: List[ErrorItem],
        status_code: Optional[int] = None,
    ):
        super().__init__(message)
        self.errors = errors
        self.status_code = status_code


def _describe(status_code: int, errors: List[ErrorItem]) -> str:
    summary = "; ".join(f"{item.code}: {item.title}" for item in errors)
    return f"API Error ({status_code}): {summary}"


class ApiError(RequestError):
    """Raised for any non-2xx response other than 401 and 429."""

    kind = ErrorKind.API

    def __init__(self, status_code: int, errors: List[ErrorItem]):
        super().__init__(_describe(status_code, errors), errors, status_code=status_code)


class AuthenticationError(RequestError):
    """Raised when the API rejects the API key (HTTP 401)."""

    kind = ErrorKind.AUTHENTICATION

    def __init__(self, errors: List[ErrorItem]):
        super().__init__(_describe(401, errors), errors, status_code=401)


class RateLimitError(RequestError):
    """Raised when the API rate limit is exceeded (HTTP 429).

    ``retry_after`` holds the server-mandated delay in seconds, when the
    response carried a parseable Retry-After header.
    """

    kind = ErrorKind.RATE_LIMIT

    def __init__(self, errors: List[ErrorItem], retry_after: Optional[int] = None):
        super().__init__(_describe(429, errors), errors, status_code=429)
        self.retry_after = retry_after


class ResponseValidationError(RequestError):
    """Raised when a successful response fails the contract check."""

    kind = ErrorKind.RESPONSE_VALIDATION

    def __init__(self, message: str, issues: List[Any]):
        errors = [
            ErrorItem(
                code="RESPONSE_VALIDATION",
                title="Response validation failed",
                detail=message,
            )
        ]
        super().__init__(f"Response validation failed: {message}", errors)
        self.issues = issues


class NetworkError(RequestError):
    """Raised when the request failed before a response was received."""

    kind = ErrorKind.NETWORK

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        errors = [ErrorItem(code="NETWORK_ERROR", title="Network request failed", detail=message)]
        super().__init__(message, errors)
        self.cause = cause


class TimeoutError(RequestError):
    """Raised when a single attempt exceeds the configured timeout."""

    kind = ErrorKind.TIMEOUT

    def __init__(self, timeout_ms: int):
        message = f"Request timed out after {timeout_ms}ms"
        errors = [ErrorItem(code="TIMEOUT", title="Request timed out", detail=message)]
        super().__init__(message, errors)
        self.timeout_ms = timeout_ms
