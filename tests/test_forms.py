"""
Tests for the submission form: validation order, payload shape and submit flow.
"""

from unittest.mock import Mock

import pytest

from recommendations.forms import (
    SUBMIT_ERROR_MESSAGE,
    SUCCESS_MESSAGE,
    RecommendationForm,
    default_category_id,
    submit_form,
)


@pytest.fixture
def valid_form():
    return RecommendationForm(
        title="Blue Bottle",
        description="Great coffee",
        address="1 Main St",
        category_id="cat-1",
    )


class TestValidation:
    """Test cases for RecommendationForm.validate()."""

    def test_valid_form_passes(self, valid_form):
        assert valid_form.validate() is None

    def test_valid_form_with_urls_passes(self, valid_form):
        valid_form.website = "https://bluebottlecoffee.com"
        valid_form.image_url = "https://example.com/cup.png"
        assert valid_form.validate() is None

    @pytest.mark.parametrize(
        "field_name, message",
        [
            ("title", "Title is required"),
            ("description", "Description is required"),
            ("address", "Address is required"),
            ("category_id", "Category is required"),
        ],
    )
    def test_required_fields(self, valid_form, field_name, message):
        setattr(valid_form, field_name, "")
        assert valid_form.validate() == message

    @pytest.mark.parametrize("field_name", ["title", "description", "address"])
    def test_whitespace_only_text_is_missing(self, valid_form, field_name):
        setattr(valid_form, field_name, "   ")
        assert valid_form.validate().endswith("is required")

    def test_first_failing_rule_wins(self):
        """Test that messages are reported in field order."""
        form = RecommendationForm(website="not-a-url", image_url="also-bad")
        assert form.validate() == "Title is required"

        form.title = "T"
        assert form.validate() == "Description is required"

        form.description = "D"
        assert form.validate() == "Address is required"

        form.address = "A"
        assert form.validate() == "Category is required"

        form.category_id = "c"
        assert form.validate() == "Invalid website URL"

        form.website = ""
        assert form.validate() == "Invalid image URL"

        form.image_url = ""
        assert form.validate() is None

    @pytest.mark.parametrize("url", ["not-a-url", "example.com", "www.example.com/page", "://missing"])
    def test_invalid_website(self, valid_form, url):
        valid_form.website = url
        assert valid_form.validate() == "Invalid website URL"

    def test_invalid_image_url(self, valid_form):
        valid_form.image_url = "just text"
        assert valid_form.validate() == "Invalid image URL"

    def test_empty_optional_urls_are_accepted(self, valid_form):
        valid_form.website = ""
        valid_form.image_url = ""
        assert valid_form.validate() is None


class TestPayload:
    def test_payload_uses_wire_keys(self, valid_form):
        valid_form.website = "https://example.com"
        payload = valid_form.to_payload()
        assert payload == {
            "title": "Blue Bottle",
            "description": "Great coffee",
            "address": "1 Main St",
            "categoryId": "cat-1",
            "website": "https://example.com",
            "imageUrl": "",
        }

    def test_as_dict_uses_field_names(self, valid_form):
        assert set(valid_form.as_dict()) == {
            "title", "description", "address", "category_id", "website", "image_url"
        }


class TestDefaultCategory:
    def test_first_category_selected(self):
        categories = [{"id": "c1", "name": "Bars"}, {"id": "c2", "name": "Parks"}]
        assert default_category_id(categories) == "c1"

    def test_no_categories(self):
        assert default_category_id([]) == ""
        assert default_category_id(None) == ""


class TestSubmit:
    """Test cases for submit_form()."""

    def test_invalid_website_blocks_request(self, valid_form):
        """Test that a bad URL shows its message, sends nothing and keeps the values."""
        valid_form.website = "not-a-url"
        before = valid_form.as_dict()
        send = Mock()

        result = submit_form(valid_form, send)

        assert result.ok is False
        assert result.sent is False
        assert result.message == "Invalid website URL"
        send.assert_not_called()
        assert valid_form.as_dict() == before

    def test_missing_title_blocks_request(self):
        send = Mock()
        result = submit_form(RecommendationForm(), send)
        assert result.message == "Title is required"
        send.assert_not_called()

    def test_successful_submit(self, valid_form):
        created = {"id": "r1", "title": "Blue Bottle"}
        send = Mock(return_value=created)

        result = submit_form(valid_form, send)

        send.assert_called_once_with(valid_form.to_payload())
        assert result.ok is True
        assert result.sent is True
        assert result.message == SUCCESS_MESSAGE
        assert result.created == created

    def test_backend_failure(self, valid_form):
        """Test that a failed request reports the generic error and keeps the values."""
        before = valid_form.as_dict()
        send = Mock(return_value=None)

        result = submit_form(valid_form, send)

        assert result.ok is False
        assert result.sent is True
        assert result.message == SUBMIT_ERROR_MESSAGE
        assert result.created is None
        assert valid_form.as_dict() == before
