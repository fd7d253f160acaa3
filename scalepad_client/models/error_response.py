"""
Error response types for ScalePad SDK.

Pydantic models describing the API's error envelope:
``{"errors": [{"code": ..., "title": ..., "detail": ...}, ...]}``.
"""

from typing import List, Optional

from pydantic import BaseModel, Field


class ErrorItem(BaseModel):
    """Single error entry in an API error response."""

    code: str = Field(..., description="Machine-readable error code")
    title: str = Field(..., description="Short human-readable summary")
    detail: Optional[str] = Field(default=None, description="Longer explanation")


class ErrorResponse(BaseModel):
    """Standard API error envelope."""

    errors: List[ErrorItem] = Field(..., min_length=1, description="Error entries")
