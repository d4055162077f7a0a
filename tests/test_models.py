"""
Tests for the shared pydantic models.
"""

from datetime import datetime

import pytest
from pydantic import ValidationError

from recommendations.models import Recommendation, RecommendationCreate, is_valid_url


class TestIsValidUrl:
    @pytest.mark.parametrize(
        "url",
        ["https://example.com", "http://localhost:8000/docs", "https://example.com/a?b=c#d"],
    )
    def test_absolute_urls(self, url):
        assert is_valid_url(url)

    @pytest.mark.parametrize("url", ["not-a-url", "example.com", "", "/relative/path"])
    def test_rejected(self, url):
        assert not is_valid_url(url)


class TestRecommendationCreate:
    """Test cases for the create input model."""

    def _valid(self, **overrides):
        data = {
            "title": "Blue Bottle",
            "description": "Great coffee",
            "address": "1 Main St",
            "categoryId": "c1",
        }
        data.update(overrides)
        return data

    def test_camel_case_input(self):
        item = RecommendationCreate.model_validate(self._valid(imageUrl="https://example.com/x.png"))
        assert item.category_id == "c1"
        assert item.image_url == "https://example.com/x.png"
        assert item.website is None

    def test_blank_urls_become_none(self):
        item = RecommendationCreate.model_validate(self._valid(website="", imageUrl="  "))
        assert item.website is None
        assert item.image_url is None

    @pytest.mark.parametrize("field_name", ["title", "description", "address", "categoryId"])
    def test_blank_required_text_rejected(self, field_name):
        with pytest.raises(ValidationError):
            RecommendationCreate.model_validate(self._valid(**{field_name: " "}))

    @pytest.mark.parametrize("field_name", ["website", "imageUrl"])
    def test_relative_url_rejected(self, field_name):
        with pytest.raises(ValidationError):
            RecommendationCreate.model_validate(self._valid(**{field_name: "not-a-url"}))

    def test_dump_uses_field_names(self):
        dumped = RecommendationCreate.model_validate(self._valid()).model_dump()
        assert dumped["category_id"] == "c1"


class TestRecommendation:
    def test_serializes_by_alias(self):
        rec = Recommendation(
            id="r1",
            title="T",
            description="D",
            address="A",
            category={"id": "c1", "name": "Bars"},
            image_url="https://example.com/i.png",
            created_at=datetime(2024, 5, 1, 10, 30),
        )
        data = rec.model_dump(by_alias=True)
        assert data["imageUrl"] == "https://example.com/i.png"
        assert data["createdAt"] == datetime(2024, 5, 1, 10, 30)
        assert data["category"] == {"id": "c1", "name": "Bars"}
