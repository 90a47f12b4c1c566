"""
Streamlit Web UI for Gallery Search

This module provides the browsing interface for the Harvard Art Museums
collection. Users pick filter values per category in the sidebar; the
selection is encoded as a pipe-joined query string and sent to the
FastAPI backend, which relays it to the upstream API.

Key Features:
- One multiselect per filter category, options loaded from the backend
- Page size selection
- Result grid with image, title, people and date
- "Load more" driven by the masked pagination link the backend returns

Technical Architecture:
- Frontend: Streamlit for interactive web UI
- Backend: FastAPI relay in front of the Harvard Art Museums API
- Communication: RESTful HTTP API calls (gallery_ui.artwork_client)
"""

import logging
from typing import Any, Dict, List

import streamlit as st

from gallery_ui import config
from gallery_ui.artwork_client import fetch_next_page, search_artworks
from gallery_ui.filter_options import FilterOptionsUnavailable, load_filter_options
from gallery_ui.filters import FilterSelection

logging.basicConfig(level=config.LOG_LEVEL)
logger = logging.getLogger(__name__)

logger.info(f"Running in {'Docker' if config.IS_DOCKER else 'local'} environment")
logger.info(f"API base URL: {config.BACKEND_URL}")

st.set_page_config(
    page_title="Gallery Search",
    page_icon="🖼️",
    layout="wide",
)


def init_session_state() -> None:
    defaults = {
        "records": [],
        "next_url": "",
        "total": None,
        "searched": False,
        "error": False,
        "selection": FilterSelection(),
    }
    for key, default in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = default


def apply_results(data: Dict[str, Any], append: bool = False) -> None:
    records = data.get("records") or []
    info = data.get("info") or {}
    st.session_state.records = (st.session_state.records if append else []) + records
    st.session_state.next_url = info.get("next") or ""
    st.session_state.total = info.get("totalrecords")
    st.session_state.error = False


def render_sidebar() -> FilterSelection:
    """Render filter widgets and sync the session's selection with them."""
    selection: FilterSelection = st.session_state.selection
    with st.sidebar:
        st.header("🔎 Filters")
        selection.size = st.selectbox(
            "Results per page",
            config.PAGE_SIZE_OPTIONS,
            index=config.PAGE_SIZE_OPTIONS.index(config.DEFAULT_PAGE_SIZE)
            if config.DEFAULT_PAGE_SIZE in config.PAGE_SIZE_OPTIONS else 0,
        )

        for category in config.FILTER_CATEGORIES:
            try:
                options = load_filter_options(category)
            except FilterOptionsUnavailable:
                st.caption(f"{category.title()}: unavailable")
                selection.set_category(category, {})
                continue
            labels = st.multiselect(category.title(), sorted(options), key=f"filter_{category}")
            selection.set_category(category, {label: options[label] for label in labels})

        with st.expander("🔧 Debug Info"):
            st.json({
                "environment": "Docker" if config.IS_DOCKER else "Local Development",
                "api_base_url": config.BACKEND_URL,
                "selection": selection.to_dict(),
            })
    return selection


def render_record(record: Dict[str, Any]) -> None:
    image_url = record.get("primaryimageurl")
    if image_url:
        st.image(image_url, width="stretch")
    else:
        st.caption("No image available")

    st.markdown(f"**{record.get('title') or 'Untitled'}**")
    people = [person.get("name") for person in record.get("people") or [] if person.get("name")]
    if people:
        st.caption(", ".join(people))
    if record.get("dated"):
        st.caption(record["dated"])
    if record.get("url"):
        st.markdown(f"[View at Harvard Art Museums]({record['url']})")


def render_results(records: List[Dict[str, Any]], columns: int = 4) -> None:
    if st.session_state.total is not None:
        st.subheader(f"🎯 Showing {len(records)} of {st.session_state.total} artworks")

    for start in range(0, len(records), columns):
        cols = st.columns(columns)
        for col, record in zip(cols, records[start:start + columns]):
            with col:
                render_record(record)


def main() -> None:
    init_session_state()

    st.title("🖼️ Gallery Search")
    st.subheader("Harvard Art Museums collection")

    selection = render_sidebar()

    if st.button("Search", type="primary"):
        with st.spinner("🔍 Searching artworks..."):
            data = search_artworks(selection)
        st.session_state.searched = True
        if data is None:
            st.session_state.error = True
            st.session_state.records = []
            st.session_state.next_url = ""
        else:
            apply_results(data)

    if st.session_state.error:
        st.error("❌ Search failed. Please check if the backend is running and try again.")
    elif st.session_state.searched and not st.session_state.records:
        st.warning("No artworks found. Try different filters.")

    if st.session_state.records:
        render_results(st.session_state.records)

    if st.session_state.next_url and st.button("Load more"):
        with st.spinner("Loading more artworks..."):
            data = fetch_next_page(st.session_state.next_url)
        if data is None:
            st.error("❌ Could not load more artworks.")
        else:
            apply_results(data, append=True)
            st.rerun()


if __name__ == "__main__":
    main()
