"""
Pydantic schemas for FastAPI request and response models.

This module defines the models used for API request validation and response
serialization, with examples for the generated API documentation.

The schemas include:
- CategoryResponse: a category as listed by GET /categories
- RecommendationResponse: a recommendation with its category embedded
- RecommendationCreateRequest: body of POST /recommendations
- HealthResponse: body of GET /health

# NOTE: These extend the canonical models in recommendations.models, so the wire
    format (camelCase keys) is defined in one place.
"""

from pydantic import BaseModel, ConfigDict, Field

from recommendations.models import Category, Recommendation, RecommendationCreate


class CategoryResponse(Category):
    """A category available for new recommendations."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "5f0c6c1e-3a57-4c1f-9a53-1d2b7f1f6a10",
                "name": "Coffee Shops",
            }
        }
    )


class RecommendationResponse(Recommendation):
    """A stored recommendation, category included."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "0b8a3c55-2f0e-4a55-9d6c-6f1e0c7f9b21",
                "title": "Blue Bottle",
                "description": "Great pour-over coffee",
                "address": "1 Main St",
                "category": {"id": "5f0c6c1e-3a57-4c1f-9a53-1d2b7f1f6a10", "name": "Coffee Shops"},
                "website": "https://bluebottlecoffee.com",
                "imageUrl": None,
                "createdAt": "2024-05-01T10:30:00",
            }
        }
    )


class RecommendationCreateRequest(RecommendationCreate):
    """
    Input model for submitting a recommendation.

    title, description, address and categoryId are required and must be non-blank.
    website and imageUrl are optional; when given they must be absolute URLs.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "Blue Bottle",
                "description": "Great pour-over coffee",
                "address": "1 Main St",
                "categoryId": "5f0c6c1e-3a57-4c1f-9a53-1d2b7f1f6a10",
                "website": "https://bluebottlecoffee.com",
                "imageUrl": "",
            }
        }
    )


class HealthResponse(BaseModel):
    """Response model for GET /health."""
    status: str = Field(..., description="Always 'ok' when the API is reachable")
    name: str = Field(..., description="API name")
    version: str = Field(..., description="API version")
    uptime_seconds: int = Field(..., ge=0, description="Seconds since the API process started")
    database_scheme: str = Field(..., description="Scheme of the configured DATABASE_URL")
    recommendations_count: int = Field(..., ge=-1, description="Stored recommendations (-1 if the store is unreachable)")
