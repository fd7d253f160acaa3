"""
ScalePad SDK - Python client for the ScalePad API.

This package provides a typed async client with pydantic response
validation, cursor pagination helpers, and rate-limit aware retries.
"""

from .api import BaseResource, Core, CoreV1
from .client import ScalePadClient
from .errors import (
    ApiError,
    AuthenticationError,
    ConfigurationError,
    ErrorKind,
    NetworkError,
    RateLimitError,
    RequestError,
    ResponseValidationError,
    ScalePadError,
    TimeoutError,
)
from .models.config import DEFAULT_RETRY_CONFIG, LogLevel, RetryConfig, ScalePadClientConfig
from .models.error_response import ErrorItem, ErrorResponse
from .models.filter import FilterClause, FilterOperator, Filters
from .models.pagination import ListResult
from .services.logger import Logger, LoggerService, NoOpLogger, create_logger
from .utils.config_loader import load_config
from .utils.filter import encode_filters
from .utils.pagination import PageFetcher, collect_all, paginate_items, paginate_pages
from .utils.sort import SortSpec, add_sort_to_params, build_sort_param

__version__ = "0.1.0"
__license__ = "MIT"

__all__ = [
    "ApiError",
    "AuthenticationError",
    "BaseResource",
    "ConfigurationError",
    "Core",
    "CoreV1",
    "DEFAULT_RETRY_CONFIG",
    "ErrorItem",
    "ErrorKind",
    "ErrorResponse",
    "FilterClause",
    "FilterOperator",
    "Filters",
    "ListResult",
    "LogLevel",
    "Logger",
    "LoggerService",
    "NetworkError",
    "NoOpLogger",
    "PageFetcher",
    "RateLimitError",
    "RequestError",
    "ResponseValidationError",
    "RetryConfig",
    "ScalePadClient",
    "ScalePadClientConfig",
    "ScalePadError",
    "SortSpec",
    "TimeoutError",
    "add_sort_to_params",
    "build_sort_param",
    "collect_all",
    "create_logger",
    "encode_filters",
    "load_config",
    "paginate_items",
    "paginate_pages",
]
