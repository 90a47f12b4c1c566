"""
Artwork Service Module

This module contains the upstream-facing logic of the backend: composing
request URLs for the Harvard Art Museums API, performing the HTTP calls and
patching the pagination links of the responses so the API key never leaves
the backend.

Key Components:
- Search URL composition from a flat, pipe-joined query
- Pagination link masking ("next" masked, "prev" cleared)
- Next-page, single-object and filter-option lookups

Every function raises on failure; the controller layer decides what the
client sees.
"""

import logging
from typing import Any, Dict, List, Mapping
from urllib.parse import urlsplit

import requests

from gallery_api import config
from gallery_api.utils.query_utils import serialize_query, mask_api_key, restore_api_key

logger = logging.getLogger(__name__)


def _masked(url: str) -> str:
    return mask_api_key(url, config.API_KEY, config.API_KEY_PLACEHOLDER)


def _get_json(url: str) -> Dict[str, Any]:
    """GET an upstream URL and return its decoded JSON body."""
    logger.info(f"Upstream request: {_masked(url)}")
    try:
        response = requests.get(url, timeout=config.UPSTREAM_TIMEOUT)
        response.raise_for_status()
    except requests.RequestException as e:
        # requests puts the full URL, key included, in its messages
        raise type(e)(_masked(str(e)), response=e.response) from None
    data = response.json()
    if not isinstance(data, dict):
        raise ValueError(f"Unexpected upstream payload type: {type(data).__name__}")
    return data


def build_search_url(query: Mapping[str, Any]) -> str:
    """
    Compose the upstream object-search URL.

    Args:
        query: Flat mapping of filter name to value, multi-select values
               already joined with "|"

    Returns:
        "{BASE_URL}/object?apikey={API_KEY}" followed by the serialized query
    """
    return f"{config.BASE_URL}/object?apikey={config.API_KEY}{serialize_query(query)}"


def redact_pagination(payload: Dict[str, Any]) -> Dict[str, Any]:
    """
    Hide the API key in a search response's pagination links.

    The "next" link has the real key replaced by the placeholder so clients
    can store and send it back; "prev" is cleared. A response on its last
    page carries no "next" link and is left without one.

    Raises:
        ValueError: If the payload has no "info" object
    """
    info = payload.get("info")
    if not isinstance(info, dict):
        raise ValueError("Upstream response has no pagination info")

    if info.get("next"):
        info["next"] = _masked(info["next"])
    info["prev"] = ""
    return payload


def fetch_artworks(query: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Search upstream artworks and return the response with masked pagination.

    Args:
        query: Flat, already pipe-joined filter mapping (e.g. request query params)

    Returns:
        Upstream JSON body with "info.next" masked and "info.prev" cleared

    Raises:
        requests.RequestException: Network failure or non-2xx status
        ValueError: Response body is not the expected JSON object
    """
    data = _get_json(build_search_url(query))
    logger.debug(f"Upstream search returned {len(data.get('records') or [])} records")
    return redact_pagination(data)


def fetch_next_page(next_url: str) -> Dict[str, Any]:
    """
    Follow a masked "next" link previously handed to a client.

    The link must point at the configured upstream API; the placeholder is
    swapped back for the real key before the call.

    Raises:
        ValueError: If the link is empty or points anywhere but BASE_URL
        requests.RequestException: Network failure or non-2xx status
    """
    if not next_url:
        raise ValueError("No pagination link given")

    base = urlsplit(config.BASE_URL)
    target = urlsplit(next_url)
    if (target.scheme, target.netloc) != (base.scheme, base.netloc) or not target.path.startswith(base.path):
        raise ValueError(f"Pagination link does not point at the upstream API: {next_url}")

    url = restore_api_key(next_url, config.API_KEY, config.API_KEY_PLACEHOLDER)
    return redact_pagination(_get_json(url))


def fetch_artwork(object_id: int) -> Dict[str, Any]:
    """Fetch a single artwork record by its upstream object id."""
    return _get_json(f"{config.BASE_URL}/object/{object_id}?apikey={config.API_KEY}")


def fetch_filter_options(category: str, size: int = 100) -> List[Dict[str, Any]]:
    """
    List the selectable values of a filter category.

    Calls the upstream facet endpoint (e.g. /medium) and keeps the id and
    name of each record, sorted by name.

    Args:
        category: One of config.FILTER_CATEGORIES
        size: Maximum number of values to return

    Raises:
        ValueError: Unknown category
        requests.RequestException: Network failure or non-2xx status
    """
    if category not in config.FILTER_CATEGORIES:
        raise ValueError(f"Unknown filter category: {category}")

    query = {"size": size, "sort": "name", "sortorder": "asc"}
    url = f"{config.BASE_URL}/{category}?apikey={config.API_KEY}{serialize_query(query)}"
    data = _get_json(url)

    options = [
        {"id": record["id"], "name": record["name"]}
        for record in data.get("records") or []
        if record.get("id") is not None and record.get("name")
    ]
    logger.debug(f"Loaded {len(options)} options for filter '{category}'")
    return options
