"""
HTTP client for the recommendations backend.

Every page reaches the FastAPI backend through the functions below: listing
recommendations, listing categories, creating a recommendation and the sidebar
health probe. Network and status errors are logged here and never reach the
Streamlit script.

# NOTE: Functions return parsed JSON on success and None on any failure
    (connection error, timeout, non-2xx status, undecodable body). Callers turn
    None into the user-visible message; this module only logs.
"""

import logging
from typing import Any, Dict, List, Optional

import requests
import streamlit as st

from api.config import BackendConfig

logger = logging.getLogger(__name__)


def get_backend_url() -> str:
    """
    Get the backend API base URL (BACKEND_URL, default http://localhost:8000).

    Returns:
        Backend URL string with trailing slash removed.
    """
    return BackendConfig.get_url()


@st.cache_data(ttl=60)  # Cache for 60 seconds to avoid hitting backend too frequently
def get_health_status() -> Optional[Dict[str, Any]]:
    """
    Check backend health status by calling /health endpoint.

    Returns:
        Dictionary with normalized status info:
        {
            "status": "ok",
            "raw": {...},  # Full response from /health endpoint
            "docs_url": "<backend>/docs"
        }
        Or None if backend is unreachable.
    """
    backend_url = get_backend_url()
    try:
        response = requests.get(f"{backend_url}/health", timeout=5)
        response.raise_for_status()
        data = response.json()
    except (requests.exceptions.RequestException, ValueError) as e:
        logger.debug("Health check failed: %s", e)
        return None

    if data.get("status") != "ok":
        return None
    return {
        "status": "ok",
        "raw": data,
        "docs_url": f"{backend_url}/docs",
    }


def _get_json(path: str) -> Optional[Any]:
    url = f"{get_backend_url()}{path}"
    try:
        response = requests.get(url, timeout=BackendConfig.get_timeout())
        response.raise_for_status()
        return response.json()
    except requests.exceptions.Timeout:
        logger.error("Request to %s timed out", url)
    except requests.exceptions.ConnectionError:
        logger.error("Could not connect to backend at %s", url)
    except requests.exceptions.HTTPError as e:
        logger.error("Backend returned an error for %s: %s - %s", url, e.response.status_code, e.response.text)
    except requests.exceptions.RequestException as e:
        logger.error("Request to %s failed: %s", url, e)
    except ValueError as e:
        logger.error("Backend response from %s is not valid JSON: %s", url, e)
    return None


def fetch_recommendations() -> Optional[List[Dict[str, Any]]]:
    """
    Fetch every recommendation (category embedded), newest first.

    Returns:
        List of recommendation dicts (camelCase keys), or None on error.
    """
    return _get_json("/recommendations")


def fetch_categories() -> Optional[List[Dict[str, Any]]]:
    """
    Fetch the categories for the submission form.

    Returns:
        List of {"id", "name"} dicts ordered by name, or None on error.
    """
    return _get_json("/categories")


def create_recommendation(payload: Dict[str, Any]) -> Optional[Dict[str, Any]]:
    """
    Submit a new recommendation.

    Args:
        payload: JSON body with title, description, address, categoryId and
                 optional website / imageUrl

    Returns:
        The created recommendation dict, or None if the backend rejected the
        request or could not be reached.
    """
    url = f"{get_backend_url()}/recommendations"
    try:
        response = requests.post(url, json=payload, timeout=BackendConfig.get_timeout())
        response.raise_for_status()
        return response.json()
    except requests.exceptions.HTTPError as e:
        logger.error("Backend rejected recommendation: %s - %s", e.response.status_code, e.response.text)
    except requests.exceptions.RequestException as e:
        logger.error("Error submitting recommendation: %s", e)
    except ValueError as e:
        logger.error("Backend response to create is not valid JSON: %s", e)
    return None
