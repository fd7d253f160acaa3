"""Pydantic models for the ScalePad SDK."""

from .config import DEFAULT_RETRY_CONFIG, LogLevel, RetryConfig, ScalePadClientConfig
from .error_response import ErrorItem, ErrorResponse
from .filter import FilterClause, FilterOperator, Filters
from .pagination import ListResult

__all__ = [
    "DEFAULT_RETRY_CONFIG",
    "ErrorItem",
    "ErrorResponse",
    "FilterClause",
    "FilterOperator",
    "Filters",
    "ListResult",
    "LogLevel",
    "RetryConfig",
    "ScalePadClientConfig",
]
