"""
Query String Utilities Module

Helpers for shaping the query strings sent to the upstream collection API
and for hiding the API key in the pagination links it returns.

Key Functions:
- Flat query mapping to "&key=value" fragments
- API key masking and restoring in pagination URLs
"""

from typing import Mapping, Any
from urllib.parse import quote

# Characters left as-is in values: "|" joins multi-select ids, "," joins field lists
SAFE_VALUE_CHARS = "|,"


def serialize_query(query: Mapping[str, Any]) -> str:
    """
    Serialize a flat query mapping into "&key=value" fragments.

    Multi-valued filters are expected to be pipe-joined already
    (e.g. {"medium": "1|2"}); the pipe is kept literal so the upstream
    API reads it as its multi-value separator. Other reserved characters
    are percent-encoded.

    Args:
        query: Flat mapping of parameter name to value, in the order
               the fragments should appear

    Returns:
        Concatenated fragments, e.g. "&size=12&medium=1|2", or "" for
        an empty mapping
    """
    return "".join(
        f"&{quote(str(key), safe='')}={quote(str(value), safe=SAFE_VALUE_CHARS)}"
        for key, value in query.items()
    )


def mask_api_key(url: str, api_key: str, placeholder: str) -> str:
    """Replace every occurrence of the API key in a URL with a placeholder."""
    if not url or not api_key:
        return url
    return url.replace(api_key, placeholder)


def restore_api_key(url: str, api_key: str, placeholder: str) -> str:
    """Swap the placeholder in a masked URL back for the real API key."""
    if not url:
        return url
    return url.replace(placeholder, api_key)
