"""
Layout helpers for the Streamlit application (page config, sidebar filters, navigation).
"""

from __future__ import annotations

from typing import List, Optional

import pandas as pd
import streamlit as st

from eo_explorer.data.filters import DEFAULT_FILTERS, FilterState, agency_options, carry_page, category_options

ALL_AGENCIES = "All Agencies"
ALL_CATEGORIES = "All Categories"

PAGE_STATE_KEY = "eo_page"
PREV_FILTERS_KEY = "eo_prev_filters"
FILTER_KEYS = ["eo_search", "eo_agency", "eo_category"]


def setup_page() -> None:
    """Set Streamlit page configuration."""
    st.set_page_config(
        page_title="Executive Orders Explorer",
        layout="wide",
        page_icon=":scroll:",
    )


def navigate(**params: str) -> None:
    """Replace the query string (``?id=`` / ``?agency=``) and rerun the script."""
    st.query_params.clear()
    for key, value in params.items():
        st.query_params[key] = value
    st.rerun()


def back_home_link(label: str = "Return to Home") -> None:
    if st.button(label, key=f"eo_home_{label}"):
        navigate()


def _clear_state_prefixes(prefixes: List[str]) -> None:
    for prefix in prefixes:
        for key in list(st.session_state.keys()):
            if key.startswith(prefix):
                del st.session_state[key]


def clear_filters() -> None:
    """Callback for the clear-filters buttons; runs before widgets are rebuilt."""
    _clear_state_prefixes(FILTER_KEYS)
    cleared = st.session_state.get(PREV_FILTERS_KEY, DEFAULT_FILTERS).cleared()
    st.session_state[PREV_FILTERS_KEY] = cleared
    st.session_state[PAGE_STATE_KEY] = cleared.current_page


def _select(label: str, key: str, options: List[str], all_label: str) -> Optional[str]:
    choices = [all_label] + options
    current = st.session_state.get(key, all_label)
    if current not in choices:
        st.session_state[key] = all_label
    choice = st.sidebar.selectbox(label, options=choices, key=key)
    return None if choice == all_label else choice


def sidebar_filters_ui(records: pd.DataFrame) -> FilterState:
    """
    Render the sidebar filter controls and return the selected values,
    with the page index reset whenever a predicate changes.
    """
    st.sidebar.header("Filter Executive Orders")

    search_text = st.sidebar.text_input(
        "Search",
        key="eo_search",
        placeholder="Search by title, document number, agency, or category...",
    )
    selected_agency = _select("By Agency", "eo_agency", agency_options(records), ALL_AGENCIES)
    selected_category = _select("By Category", "eo_category", category_options(records), ALL_CATEGORIES)

    st.sidebar.button("Clear Filters", key="eo_clear_filters", on_click=clear_filters)

    current = FilterState(
        selected_agency=selected_agency,
        selected_category=selected_category,
        search_text=search_text or "",
        current_page=max(int(st.session_state.get(PAGE_STATE_KEY, 1)), 1),
    )
    state = carry_page(st.session_state.get(PREV_FILTERS_KEY), current)
    st.session_state[PAGE_STATE_KEY] = state.current_page
    st.session_state[PREV_FILTERS_KEY] = state
    return state
