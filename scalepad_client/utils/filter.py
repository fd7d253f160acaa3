"""
Filter utilities for ScalePad SDK.

This module turns filter mappings into the API's query parameter format:
``filter[<field>]=<op>: <value>``. Values that could be confused with the
API's own clause or boolean syntax are wrapped in double quotes.
"""

import re
from typing import List, Optional, Sequence, Tuple, Union

from ..models.filter import FilterClause, Filters, ScalarValue

_BOOLEAN_WORD = re.compile(r"\b(?:OR|AND)\b", re.ASCII)


def needs_quoting(value: str) -> bool:
    """
    Check if a value needs to be quoted.

    A value is quoted when it contains a comma, colon or space, or the whole
    words ``OR``/``AND`` (``ORDER`` or ``BRAND`` do not count).

    Args:
        value: Stringified filter value

    Returns:
        True if the value must be wrapped in double quotes

    Examples:
        >>> needs_quoting("Acme, Inc")
        True
        >>> needs_quoting("ORDER")
        False
    """
    if "," in value or ":" in value or " " in value:
        return True
    return bool(_BOOLEAN_WORD.search(value))


def _stringify(value: ScalarValue) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _quote(value: str) -> str:
    # Embedded double quotes are passed through unescaped
    return f'"{value}"' if needs_quoting(value) else value


def format_filter_value(value: Union[ScalarValue, Sequence[str]]) -> str:
    """
    Format a filter value for the query string.

    Scalars are stringified and quote-checked. Lists (``in`` operator) are
    quote-checked per element and joined with commas, keeping input order.

    Args:
        value: Scalar or list of strings

    Returns:
        Formatted value

    Examples:
        >>> format_filter_value(["a", "b c"])
        'a,"b c"'
        >>> format_filter_value(True)
        'true'
    """
    if isinstance(value, (list, tuple)):
        return ",".join(_quote(_stringify(item)) for item in value)
    return _quote(_stringify(value))


def encode_filters(filters: Optional[Filters]) -> List[Tuple[str, str]]:
    """
    Convert a filter mapping into ordered query parameter pairs.

    Args:
        filters: Mapping of dotted field path to FilterClause (or a dict with
            ``op`` and ``value`` keys)

    Returns:
        List of ``(key, value)`` pairs in the mapping's iteration order

    Raises:
        pydantic.ValidationError: If a clause has an unknown operator or a
            value of the wrong shape for its operator

    Examples:
        >>> encode_filters({"status": FilterClause(op="eq", value="active")})
        [('filter[status]', 'eq: active')]
        >>> encode_filters({"region": {"op": "in", "value": ["eu", "us"]}})
        [('filter[region]', 'in: eu,us')]
    """
    if not filters:
        return []

    params: List[Tuple[str, str]] = []
    for field, clause in filters.items():
        if not isinstance(clause, FilterClause):
            clause = FilterClause.model_validate(clause)
        params.append((f"filter[{field}]", f"{clause.op}: {format_filter_value(clause.value)}"))
    return params
