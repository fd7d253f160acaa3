"""Utility modules for the ScalePad SDK."""

from .config_loader import load_config
from .data_masker import DataMasker
from .filter import encode_filters, format_filter_value, needs_quoting
from .pagination import PageFetcher, collect_all, paginate_items, paginate_pages
from .sort import add_sort_to_params, build_sort_param

__all__ = [
    "DataMasker",
    "PageFetcher",
    "add_sort_to_params",
    "build_sort_param",
    "collect_all",
    "encode_filters",
    "format_filter_value",
    "load_config",
    "needs_quoting",
    "paginate_items",
    "paginate_pages",
]
