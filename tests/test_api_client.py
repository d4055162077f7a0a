"""
Tests for the Streamlit backend API client.

requests is mocked; every function must return parsed JSON on success and None
on any failure without raising.
"""

import os
from unittest.mock import Mock, patch

import pytest
import requests

from streamlit_app.utils import api_client


def _response(json_data=None, status_code=200, json_error=None):
    response = Mock()
    response.status_code = status_code
    response.text = "body"
    if json_error:
        response.json.side_effect = json_error
    else:
        response.json.return_value = json_data
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.exceptions.HTTPError(response=response)
    else:
        response.raise_for_status.return_value = None
    return response


@pytest.fixture(autouse=True)
def backend_env():
    with patch.dict(os.environ, {"BACKEND_URL": "http://backend:9000/", "BACKEND_TIMEOUT_SECONDS": "7"}):
        yield


class TestFetch:
    """Test cases for GET helpers."""

    @patch("streamlit_app.utils.api_client.requests.get")
    def test_fetch_recommendations_success(self, mock_get):
        mock_get.return_value = _response([{"id": "r1"}])

        assert api_client.fetch_recommendations() == [{"id": "r1"}]
        mock_get.assert_called_once_with("http://backend:9000/recommendations", timeout=7.0)

    @patch("streamlit_app.utils.api_client.requests.get")
    def test_fetch_categories_success(self, mock_get):
        mock_get.return_value = _response([{"id": "c1", "name": "Bars"}])

        assert api_client.fetch_categories() == [{"id": "c1", "name": "Bars"}]
        mock_get.assert_called_once_with("http://backend:9000/categories", timeout=7.0)

    @pytest.mark.parametrize(
        "error",
        [
            requests.exceptions.Timeout("slow"),
            requests.exceptions.ConnectionError("refused"),
            requests.exceptions.RequestException("other"),
        ],
    )
    @patch("streamlit_app.utils.api_client.requests.get")
    def test_transport_errors_return_none(self, mock_get, error):
        mock_get.side_effect = error
        assert api_client.fetch_recommendations() is None

    @patch("streamlit_app.utils.api_client.requests.get")
    def test_error_status_returns_none(self, mock_get):
        mock_get.return_value = _response({"detail": "Failed to fetch recommendations"}, status_code=500)
        assert api_client.fetch_recommendations() is None

    @patch("streamlit_app.utils.api_client.requests.get")
    def test_invalid_json_returns_none(self, mock_get):
        mock_get.return_value = _response(json_error=ValueError("no json"))
        assert api_client.fetch_categories() is None


class TestCreate:
    """Test cases for create_recommendation()."""

    @patch("streamlit_app.utils.api_client.requests.post")
    def test_create_success(self, mock_post):
        created = {"id": "r1", "title": "Blue Bottle"}
        mock_post.return_value = _response(created)
        payload = {"title": "Blue Bottle", "categoryId": "c1"}

        assert api_client.create_recommendation(payload) == created
        mock_post.assert_called_once_with(
            "http://backend:9000/recommendations", json=payload, timeout=7.0
        )

    @pytest.mark.parametrize("status_code", [400, 422, 500])
    @patch("streamlit_app.utils.api_client.requests.post")
    def test_rejected_returns_none(self, mock_post, status_code):
        mock_post.return_value = _response({"detail": "nope"}, status_code=status_code)
        assert api_client.create_recommendation({"title": "x"}) is None

    @patch("streamlit_app.utils.api_client.requests.post")
    def test_connection_error_returns_none(self, mock_post):
        mock_post.side_effect = requests.exceptions.ConnectionError("refused")
        assert api_client.create_recommendation({"title": "x"}) is None


class TestBackendUrl:
    def test_trailing_slash_removed(self):
        assert api_client.get_backend_url() == "http://backend:9000"
