"""
Utility modules for the Streamlit frontend.

This package contains:
- api_client: Backend API communication
- session: Page activation tracking and per-activation session state
"""
