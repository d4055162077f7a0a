"""
Session management utilities for Streamlit pages.

Streamlit reruns a page script on every interaction, so "the page was opened"
has to be tracked explicitly. Each page calls activate_page() first; a page is
newly activated when the previous script run belonged to a different page (or
this is the first run of the session).

Per-activation state lives in st.session_state:
- the listing page's ListingState (disposed and replaced on every activation)
- the submission form's categories (loaded once per activation)
"""

from typing import Any, Dict, List, Optional

import streamlit as st

from recommendations.listing import ListingState

ACTIVE_PAGE_KEY = "active_page"
LISTING_STATE_KEY = "listing_state"
FORM_CATEGORIES_KEY = "form_categories"


def activate_page(page_key: str) -> bool:
    """
    Record that page_key is being rendered.

    Args:
        page_key: Stable identifier of the page (e.g. "recommendations", "add")

    Returns:
        True if the page was just opened, False on a rerun of the same page
    """
    previous = st.session_state.get(ACTIVE_PAGE_KEY)
    st.session_state[ACTIVE_PAGE_KEY] = page_key
    return previous != page_key


def get_listing_state(new_activation: bool) -> ListingState:
    """
    Get the listing state for the current activation.

    On a new activation the previous state (if any) is disposed, so a response
    still in flight for it can no longer be applied, and a fresh state is created.

    Args:
        new_activation: Result of activate_page() for the listing page

    Returns:
        ListingState owned by this activation
    """
    state: Optional[ListingState] = st.session_state.get(LISTING_STATE_KEY)
    if state is None or new_activation:
        if state is not None:
            state.dispose()
        state = ListingState()
        st.session_state[LISTING_STATE_KEY] = state
    return state


def get_form_categories(new_activation: bool) -> Optional[List[Dict[str, Any]]]:
    """
    Categories loaded for the current form activation.

    Returns:
        The stored list, or None if they still have to be (re)loaded
    """
    if new_activation:
        st.session_state.pop(FORM_CATEGORIES_KEY, None)
    return st.session_state.get(FORM_CATEGORIES_KEY)


def set_form_categories(categories: List[Dict[str, Any]]) -> None:
    st.session_state[FORM_CATEGORIES_KEY] = categories
