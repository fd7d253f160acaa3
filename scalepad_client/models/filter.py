"""
Filter types for ScalePad SDK.

A filter is a mapping from a dotted field path to a FilterClause. The API
supports a fixed set of comparison operators; ``in`` takes a list of values
while every other operator takes a single scalar.
"""

from typing import List, Literal, Mapping, Union

from pydantic import BaseModel, Field, model_validator

FilterOperator = Literal["eq", "in", "lt", "lte", "gt", "gte"]

ScalarValue = Union[bool, int, float, str]
FilterValue = Union[ScalarValue, List[str]]


class FilterClause(BaseModel):
    """
    Single filter clause.

    Fields:
        op: Comparison operator
        value: Scalar value, or list of strings for the ``in`` operator
    """

    op: FilterOperator = Field(..., description="Filter operator")
    value: FilterValue = Field(..., description="Filter value")

    @model_validator(mode="after")
    def _check_value_shape(self) -> "FilterClause":
        if self.op == "in" and not isinstance(self.value, list):
            raise ValueError("'in' operator requires a list value")
        if self.op != "in" and isinstance(self.value, list):
            raise ValueError(f"'{self.op}' operator requires a scalar value")
        return self


Filters = Mapping[str, Union[FilterClause, Mapping]]
