"""
Artwork Client Module

HTTP client the Streamlit UI uses to talk to the Gallery Search API.
Every call follows the same contract: a non-ok status raises
ArtworkFetchError, which is caught and logged together with any
requests failure, and the call returns None. The UI decides what to show.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional, Union

import requests

from gallery_ui import config
from gallery_ui.filters import FilterSelection
from gallery_ui.query_encoder import encode_filters, to_query_string

logger = logging.getLogger(__name__)


class ArtworkFetchError(Exception):
    """Raised when the backend answers with a non-ok status."""


def _get(url: str, params: Optional[Dict[str, Any]] = None) -> Optional[Dict[str, Any]]:
    try:
        response = requests.get(url, params=params, timeout=config.REQUEST_TIMEOUT)
        if not response.ok:
            raise ArtworkFetchError("Something went wrong")
        return response.json()
    except (ArtworkFetchError, requests.RequestException, ValueError) as e:
        logger.error(f"Request to {url} failed: {e}")
        return None


def build_search_url(selection: Optional[Union[Mapping[str, Any], FilterSelection]]) -> Optional[str]:
    """Backend search URL for a selection, or None when there is no selection."""
    fragment = encode_filters(selection)
    if fragment is None:
        return None
    return f"{config.BACKEND_URL}/artworks/search{to_query_string(fragment)}"


def search_artworks(selection: Optional[Union[Mapping[str, Any], FilterSelection]]) -> Optional[Dict[str, Any]]:
    """
    Search artworks matching a filter selection.

    Args:
        selection: FilterSelection or its mapping form

    Returns:
        {"info": {...}, "records": [...]} from the backend, or None if
        there was no selection, the selection could not be encoded or
        the request failed
    """
    try:
        url = build_search_url(selection)
    except ValueError as e:
        logger.error(f"Cannot encode filter selection: {e}")
        return None
    if url is None:
        logger.info("No filter selection; skipping search")
        return None
    return _get(url)


def fetch_next_page(next_url: Optional[str]) -> Optional[Dict[str, Any]]:
    """Load the page behind a masked "info.next" link."""
    if not next_url:
        return None
    return _get(f"{config.BACKEND_URL}/artworks/next", params={"url": next_url})


def fetch_artwork(object_id: int) -> Optional[Dict[str, Any]]:
    return _get(f"{config.BACKEND_URL}/artworks/{object_id}")


def fetch_filter_options(category: str) -> List[Dict[str, Any]]:
    """
    Selectable values of a filter category as [{"id": ..., "name": ...}].

    Returns an empty list when the backend cannot provide them.
    """
    data = _get(f"{config.BACKEND_URL}/filters/{category}")
    if not data:
        return []
    return data.get("options", [])
