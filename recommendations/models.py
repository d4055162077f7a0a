"""
Category and recommendation models for the recommendation system.

This module defines the canonical schemas shared by the store, the API and the
Streamlit frontend.

# NOTE: Python code uses snake_case attributes; the JSON wire format uses camelCase
    keys (categoryId, imageUrl, createdAt). Models accept both spellings (populate_by_name=True) and
    serialize by alias.
"""

from datetime import datetime
from typing import Optional

from pydantic import AnyUrl, BaseModel, ConfigDict, Field, TypeAdapter, ValidationError, field_validator
from pydantic.alias_generators import to_camel

_URL_ADAPTER = TypeAdapter(AnyUrl)


def is_valid_url(value: str) -> bool:
    """
    Check whether a string parses as an absolute URL.

    Args:
        value: Candidate URL text (e.g. "https://example.com")

    Returns:
        True if the value has a scheme and parses as a URL, False otherwise
    """
    try:
        _URL_ADAPTER.validate_python(value)
    except ValidationError:
        return False
    return True


class CamelModel(BaseModel):
    """Base model serializing to camelCase while accepting snake_case input."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class Category(CamelModel):
    """A named grouping applied to recommendations."""

    id: str = Field(..., description="Opaque unique category identifier")
    name: str = Field(..., description="Unique display name")


class Recommendation(CamelModel):
    """
    A user-submitted place entry as returned by the store.

    Each recommendation embeds the category it references.
    """

    id: str = Field(..., description="Opaque unique recommendation identifier")
    title: str = Field(..., description="Place title")
    description: str = Field(..., description="Free text description")
    address: str = Field(..., description="Street address")
    category: Category = Field(..., description="Category this recommendation belongs to")
    website: Optional[str] = Field(None, description="Absolute URL of the place website")
    image_url: Optional[str] = Field(None, description="Absolute URL of an image of the place")
    created_at: datetime = Field(..., description="Creation timestamp")


class RecommendationCreate(CamelModel):
    """
    Input model for creating a recommendation.

    Required text fields must be non-blank. Optional URLs are normalized so that an
    empty string means "not provided"; anything else must be an absolute URL.
    """

    title: str = Field(..., description="Place title")
    description: str = Field(..., description="Free text description")
    address: str = Field(..., description="Street address")
    category_id: str = Field(..., description="Identifier of an existing category")
    website: Optional[str] = Field(None, description="Optional absolute URL of the place website")
    image_url: Optional[str] = Field(None, description="Optional absolute URL of an image")

    @field_validator("title", "description", "address", "category_id")
    @classmethod
    def _require_text(cls, value: str) -> str:
        if not value or not value.strip():
            raise ValueError("must not be empty")
        return value

    @field_validator("website", "image_url", mode="before")
    @classmethod
    def _blank_url_to_none(cls, value):
        if value is None:
            return None
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("website", "image_url")
    @classmethod
    def _require_absolute_url(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and not is_valid_url(value):
            raise ValueError("must be an absolute URL")
        return value
