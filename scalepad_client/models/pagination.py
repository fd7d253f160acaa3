"""
Pagination types for ScalePad SDK.

This module contains Pydantic models that define the cursor-based page
envelope returned by list endpoints.
"""

from typing import Generic, List, Optional, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class ListResult(BaseModel, Generic[T]):
    """
    Page envelope for list responses.

    Generic type parameter T represents the item type in the data array.

    Fields:
        data: Items of the current page, in API order
        total_count: Total logical size of the result set (not ``len(data)``)
        next_cursor: Opaque cursor for the next page; ``None`` on the last page
    """

    data: List[T] = Field(..., description="Array of items for current page")
    total_count: int = Field(..., ge=0, description="Total number of items")
    next_cursor: Optional[str] = Field(default=None, description="Cursor for the next page")
