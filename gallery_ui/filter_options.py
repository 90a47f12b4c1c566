"""Cached filter-option lookups for the sidebar widgets."""

import logging
from typing import Dict

import streamlit as st

from gallery_ui.artwork_client import fetch_filter_options

logger = logging.getLogger(__name__)


class FilterOptionsUnavailable(Exception):
    """Raised when the backend returns no options for a category."""


@st.cache_data(ttl=60 * 60, show_spinner=False)
def load_filter_options(category: str) -> Dict[str, int]:
    """
    Label -> id mapping for a category, cached for an hour.

    st.cache_data does not cache exceptions, so a failed or empty lookup
    raises instead of being remembered, and the next rerun tries again.

    Raises:
        FilterOptionsUnavailable: The backend gave no options for the category
    """
    options = fetch_filter_options(category)
    if not options:
        raise FilterOptionsUnavailable(category)
    return {option["name"]: option["id"] for option in options}
