"""
Place Recommendations - Streamlit Frontend Main Entry Point.

This is the main Streamlit application entry point. It sets up the page configuration
and provides the landing page with sidebar navigation and backend status.

Note: Multi-page routing is handled automatically by Streamlit via the `pages/` folder.
Files in `pages/` starting with numbered prefixes (e.g., `01_📍_Recommendations.py`) will appear
as pages in the sidebar navigation.

Run with:
    streamlit run streamlit_app/app.py
"""

import sys
from pathlib import Path

# Ensure the streamlit_app directory is in the Python path
# This allows imports to work regardless of how the app is run
streamlit_app_dir = Path(__file__).parent
if str(streamlit_app_dir) not in sys.path:
    sys.path.insert(0, str(streamlit_app_dir))

# Add project root to path so we can import api.config
project_root = streamlit_app_dir.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

# Import config early to load .env file before any other code accesses environment variables
import api.config  # noqa: F401

import streamlit as st

from api.config import get_config_summary
from utils.api_client import get_health_status
from utils.session import activate_page
from ui.styles import load_global_styles
from ui.layout import page_header

LISTING_PAGE_PATH = "pages/01_📍_Recommendations.py"
ADD_PAGE_PATH = "pages/02_➕_Add_Recommendation.py"

# Page configuration - must be called before any other Streamlit commands
st.set_page_config(
    page_title="Place Recommendations",
    page_icon="📍",
    layout="wide",
    initial_sidebar_state="expanded"
)

load_global_styles()
activate_page("home")

with st.sidebar:
    st.markdown("### 📍 **Place Recommendations**")

    st.divider()

    with st.expander("System status", expanded=False):
        backend_status = get_health_status()
        if backend_status:
            raw_status = backend_status.get("raw", {})
            st.success("🟢 Backend online")
            st.caption(f"Stored recommendations: {raw_status.get('recommendations_count', 'n/a')}")
            st.caption(f"Database: {raw_status.get('database_scheme', 'unknown')}")
            st.markdown(f"[API docs]({backend_status['docs_url']})")
        else:
            st.error("🔴 Backend offline / unreachable")
        st.caption(f"Backend URL: {get_config_summary()['backend_url']}")

page_header(
    "Place Recommendations",
    subtitle="Share the places you love and discover what others recommend.",
)

cta_col1, cta_col2 = st.columns(2, gap="medium")

with cta_col1:
    if st.button("Browse recommendations", use_container_width=True, type="primary"):
        st.switch_page(LISTING_PAGE_PATH)

with cta_col2:
    if st.button("Add a recommendation", use_container_width=True):
        st.switch_page(ADD_PAGE_PATH)

st.divider()

with st.expander("How it works", expanded=False):
    st.markdown("""
    1. **Browse** – See every recommendation as cards or as a table, and search by title, description, address or category.
    2. **Add** – Submit a place with its address, a category and optional website and image links.
    """)
