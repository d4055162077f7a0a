"""
Recommendation listing components.

render_listing_controls() draws the search box and the grid/table toggle and
writes their values into the ListingState; render_listing() paints whatever
the state's display state calls for. Neither function talks to the backend.
"""

import streamlit as st

from recommendations.listing import (
    EMPTY_MESSAGE,
    LOADING_MESSAGE,
    DisplayState,
    ListingState,
    ViewMode,
    no_matches_message,
)
from recommendations.rendering import render_grid_html, render_table_html
from ui.feedback import show_empty_state, show_status

ADD_PAGE_PATH = "pages/02_➕_Add_Recommendation.py"

QUERY_WIDGET_KEY = "listing_query_input"
MODE_WIDGET_KEY = "listing_mode_input"
LISTING_WIDGET_KEYS = (QUERY_WIDGET_KEY, MODE_WIDGET_KEY)

VIEW_MODE_LABELS = {
    ViewMode.GRID: "▦ Grid",
    ViewMode.TABLE: "☰ Table",
}


def render_listing_controls(state: ListingState) -> None:
    """
    Render search and view-mode controls and store their values in state.

    Args:
        state: ListingState of the current page activation
    """
    search_col, mode_col = st.columns([3, 1], gap="medium")

    with search_col:
        query = st.text_input(
            "Search recommendations",
            value=state.query,
            placeholder="Search by title, description, address or category…",
            label_visibility="collapsed",
            key=QUERY_WIDGET_KEY,
        )

    with mode_col:
        modes = list(VIEW_MODE_LABELS.keys())
        mode = st.radio(
            "View",
            options=modes,
            index=modes.index(state.mode),
            format_func=lambda m: VIEW_MODE_LABELS[m],
            horizontal=True,
            label_visibility="collapsed",
            key=MODE_WIDGET_KEY,
        )

    state.set_query(query)
    state.set_mode(mode)


def render_listing(state: ListingState) -> None:
    """
    Render the listing body for the current state.

    Args:
        state: ListingState of the current page activation
    """
    display = state.display_state()

    if display is DisplayState.LOADING:
        show_status(LOADING_MESSAGE)
    elif display is DisplayState.ERROR:
        show_status(state.error_message or "", is_error=True)
    elif display is DisplayState.EMPTY:
        show_empty_state(
            EMPTY_MESSAGE,
            subtitle="Be the first to share a place you love.",
            action_label="Add a recommendation",
            action_page_path=ADD_PAGE_PATH,
        )
    elif display is DisplayState.NO_MATCHES:
        show_status(no_matches_message(state.query))
    else:
        filtered = state.filtered
        st.caption(f"Showing **{len(filtered)}** of **{len(state.items)}** recommendations.")
        if state.mode is ViewMode.TABLE:
            st.markdown(render_table_html(filtered), unsafe_allow_html=True)
        else:
            st.markdown(render_grid_html(filtered), unsafe_allow_html=True)
