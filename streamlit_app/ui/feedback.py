"""
Feedback helpers for the listing and form pages.

The listing page reports loading, error, empty and no-match states as a single
centered status line (show_status). The form reports validation and submit
errors inline under the form (show_error).
"""

from contextlib import contextmanager
from html import escape
from typing import Optional

import streamlit as st


def show_status(message: str, is_error: bool = False) -> None:
    """
    Display a centered status line.

    Args:
        message: Text to display
        is_error: Render in the error color
    """
    css_class = "rec-status rec-status--error" if is_error else "rec-status"
    st.markdown(f'<div class="{css_class}">{escape(message)}</div>', unsafe_allow_html=True)


def show_error(message: str, hint: Optional[str] = None) -> None:
    """
    Display an inline error message with optional hint.

    Args:
        message: Error message exactly as it should be read by the user
        hint: Optional hint text to help users resolve the issue
    """
    st.error(f"⚠️ {message}")
    if hint:
        st.caption(f"💡 {hint}")


def show_success(message: str) -> None:
    st.success(message)


def show_empty_state(
    message: str,
    subtitle: Optional[str] = None,
    action_label: Optional[str] = None,
    action_page_path: Optional[str] = None,
) -> None:
    """
    Display the empty-list status with an optional link to another page.

    Args:
        message: Status line text
        subtitle: Optional caption below the status line
        action_label: Link label
        action_page_path: Page the link opens (e.g. the submission form)
    """
    show_status(message)
    if subtitle:
        st.caption(subtitle)
    if action_label and action_page_path:
        st.page_link(action_page_path, label=action_label, icon="➕")


@contextmanager
def working_spinner(label: str):
    """Spinner shown while a backend request is in flight."""
    with st.spinner(label):
        yield
