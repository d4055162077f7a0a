"""
Configuration management for Place Recommendations.

This module centralizes environment variable loading from .env file at project root.
It should be imported early in both backend (api/main.py) and frontend (streamlit_app/app.py)
to ensure .env is loaded before any other code accesses environment variables.

In production, .env will usually not exist; load_dotenv() is safe to call and will no-op.
Platform environment variables will be used instead.

Environment Variables:
- DATABASE_URL: Optional, SQLAlchemy URL of the store (defaults to sqlite:///./recommendations.db)
- DATABASE_ECHO: Optional, set to "1"/"true" to log every SQL statement
- BACKEND_URL: Optional, backend URL used by the Streamlit app (defaults to http://localhost:8000)
- BACKEND_TIMEOUT_SECONDS: Optional, HTTP timeout for frontend -> backend calls (defaults to 30)
"""

import os
from pathlib import Path
from typing import Any, Dict

from dotenv import load_dotenv

DEFAULT_DATABASE_URL = "sqlite:///./recommendations.db"
DEFAULT_BACKEND_URL = "http://localhost:8000"
DEFAULT_BACKEND_TIMEOUT = 30.0


def load_env_file() -> None:
    """
    Load environment variables from .env file at project root.

    The project root is found by going up from this file's location
    (api/config.py -> project root). Existing environment variables take precedence.
    Safe to call multiple times.
    """
    project_root = Path(__file__).resolve().parent.parent
    load_dotenv(project_root / ".env", override=False)


# Load .env file on module import
load_env_file()


class DatabaseConfig:
    """Configuration for the relational recommendation store."""

    @staticmethod
    def get_url() -> str:
        """
        Get the SQLAlchemy database URL.

        Returns:
            Database URL string (default: a SQLite file in the working directory)
        """
        return os.getenv("DATABASE_URL") or DEFAULT_DATABASE_URL

    @staticmethod
    def get_echo() -> bool:
        """Whether SQLAlchemy should echo SQL statements to the log."""
        return os.getenv("DATABASE_ECHO", "").strip().lower() in ("1", "true", "yes")


class BackendConfig:
    """Configuration used by the Streamlit frontend to reach the API."""

    @staticmethod
    def get_url() -> str:
        """
        Get the backend API base URL.

        Returns:
            Backend URL string with trailing slash removed.
        """
        url = os.getenv("BACKEND_URL", DEFAULT_BACKEND_URL)
        return url.rstrip("/")

    @staticmethod
    def get_timeout() -> float:
        """
        Get the HTTP timeout (seconds) for calls to the backend.

        Falls back to the default when the variable is missing or not a number.
        """
        raw = os.getenv("BACKEND_TIMEOUT_SECONDS")
        if not raw:
            return DEFAULT_BACKEND_TIMEOUT
        try:
            timeout = float(raw)
        except ValueError:
            return DEFAULT_BACKEND_TIMEOUT
        return timeout if timeout > 0 else DEFAULT_BACKEND_TIMEOUT


def get_config_summary() -> Dict[str, Any]:
    """
    Get a non-secret summary of the active configuration.

    Returns:
        Dictionary with:
        - database_scheme: scheme part of DATABASE_URL (e.g. "sqlite", "postgresql")
        - backend_url: URL the frontend calls
        - backend_timeout: HTTP timeout in seconds
    """
    return {
        "database_scheme": DatabaseConfig.get_url().split(":", 1)[0],
        "backend_url": BackendConfig.get_url(),
        "backend_timeout": BackendConfig.get_timeout(),
    }
