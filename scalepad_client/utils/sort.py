"""
Sort utilities for ScalePad SDK.

Sort specifications are field names optionally prefixed with ``+``
(ascending, the default) or ``-`` (descending). Their order is significant
and is preserved on the wire.
"""

from typing import List, Literal, Optional, Sequence, Tuple

SortSpec = str
SortParamName = Literal["sort", "sort_by"]


def build_sort_param(sorts: Optional[Sequence[SortSpec]]) -> Optional[str]:
    """
    Build the sort parameter value.

    Args:
        sorts: Sort specifications, e.g. ``["-updated_at", "name"]``

    Returns:
        Comma-joined specifications, or None when there is nothing to sort by

    Examples:
        >>> build_sort_param(["-a", "b"])
        '-a,b'
        >>> build_sort_param([]) is None
        True
    """
    if not sorts:
        return None
    return ",".join(sorts)


def add_sort_to_params(
    params: List[Tuple[str, str]],
    sorts: Optional[Sequence[SortSpec]],
    param_name: SortParamName = "sort",
) -> None:
    """
    Append the sort parameter to a list of query parameter pairs.

    Args:
        params: Query parameter pairs to extend in place
        sorts: Sort specifications
        param_name: Parameter name used by the resource (``sort`` or ``sort_by``)
    """
    sort_value = build_sort_param(sorts)
    if sort_value:
        params.append((param_name, sort_value))
