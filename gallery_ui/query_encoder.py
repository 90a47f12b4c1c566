"""
Filter Query Encoder Module

Turns the UI's filter selection into the query fragment the backend's
artwork search expects. Multi-select categories are pipe-joined, the
convention the upstream API uses for "any of these values":

    {"size": 12, "medium": {"oil": 1, "acrylic": 2}}  ->  "&size=12&medium=1|2"
"""

from typing import Any, Mapping, Optional, Union

from gallery_ui.filters import FilterSelection

MULTI_VALUE_SEPARATOR = "|"


def encode_filters(selection: Optional[Union[Mapping[str, Any], FilterSelection]]) -> Optional[str]:
    """
    Encode a filter selection as "&key=value" fragments.

    The fragment always starts with "&size=<n>". Each nested category then
    contributes "&<category>=<id1>|<id2>..." with ids in the order they were
    selected; categories with nothing selected are left out. Scalar
    categories other than size are emitted as plain "&key=value".

    Args:
        selection: Mapping of category to a scalar (size) or a
                   label -> identifier mapping, or a FilterSelection

    Returns:
        Query fragment with a leading "&", or None when there is no
        selection. Callers strip the "&" and prepend "?" (see to_query_string).

    Raises:
        ValueError: If a non-empty selection has no "size"
    """
    if isinstance(selection, FilterSelection):
        selection = selection.to_dict()
    if not selection:
        return None
    if "size" not in selection:
        raise ValueError("Filter selection has no 'size'")

    fragment = f"&size={selection['size']}"
    for category, value in selection.items():
        if category == "size":
            continue
        if isinstance(value, Mapping):
            if not value:
                continue
            joined = MULTI_VALUE_SEPARATOR.join(str(identifier) for identifier in value.values())
            fragment += f"&{category}={joined}"
        else:
            fragment += f"&{category}={value}"
    return fragment


def to_query_string(fragment: Optional[str]) -> str:
    """Turn an encoded fragment ("&a=1&b=2") into a query string ("?a=1&b=2")."""
    if not fragment:
        return ""
    return "?" + fragment.lstrip("&")
