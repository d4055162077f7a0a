"""
UI Styling and Components Module.

This module provides global CSS styling and reusable UI components
for the Place Recommendations Streamlit app.
"""

from ui.styles import load_global_styles
from ui.layout import page_header

__all__ = [
    "load_global_styles",
    "page_header",
]
