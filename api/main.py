"""
FastAPI application for the Place Recommendations API.

This module defines the REST API endpoints for the recommendations backend:
- GET /recommendations: List all recommendations (category embedded), newest first
- POST /recommendations: Create a recommendation
- GET /categories: List categories (see api/routers/categories.py)
- GET /health: Health check

There is no update or delete endpoint; POST /recommendations is the only write path.

Run the API with:
    uvicorn api.main:app --reload

Access API documentation at:
    http://localhost:8000/docs (Swagger UI)
    http://localhost:8000/redoc (ReDoc)
"""

# Import config early to load .env file before any other code accesses environment variables
import api.config  # noqa: F401

import logging
import time
from typing import List

from fastapi import FastAPI, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError

from api.config import get_config_summary
from api.routers.categories import router as categories_router
from api.schemas import HealthResponse, RecommendationCreateRequest, RecommendationResponse
from recommendations.db import (
    UnknownCategoryError,
    db_count_recommendations,
    db_create_recommendation,
    db_list_recommendations,
    init_db,
)

logger = logging.getLogger(__name__)

API_NAME = "Place Recommendations API"
API_VERSION = "1.0.0"
API_DESCRIPTION = "Backend API for submitting and browsing categorized place recommendations"

# Track app start time for uptime calculation
_APP_START_TIME = time.time()

app = FastAPI(
    title=API_NAME,
    description=API_DESCRIPTION,
    version=API_VERSION,
    openapi_tags=[
        {
            "name": "recommendations",
            "description": "Create and list recommendations.",
        },
        {
            "name": "categories",
            "description": "Categories available for new recommendations.",
        },
        {
            "name": "health",
            "description": "Health check and monitoring endpoints.",
        },
    ],
)

app.include_router(categories_router)

# Create tables on startup; the API still starts if the store is unreachable
try:
    init_db()
except SQLAlchemyError as e:
    logger.warning(f"Database initialization failed: {e}")


@app.get(
    "/recommendations",
    response_model=List[RecommendationResponse],
    tags=["recommendations"],
    summary="List recommendations",
    description="Return every recommendation with its category embedded, ordered newest first.",
)
def list_recommendations() -> List[RecommendationResponse]:
    """
    List all recommendations.

    Returns:
        List of RecommendationResponse models ordered by creation time (newest first)

    Raises:
        HTTPException 500: If the store cannot be read
    """
    try:
        rows = db_list_recommendations()
    except SQLAlchemyError as e:
        logger.error("Error fetching recommendations: %s", e, exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch recommendations",
        ) from e

    return [RecommendationResponse.model_validate(row) for row in rows]


@app.post(
    "/recommendations",
    response_model=RecommendationResponse,
    tags=["recommendations"],
    summary="Create a recommendation",
    description="Store a new recommendation. Empty website / imageUrl values are stored as null.",
)
def create_recommendation(item: RecommendationCreateRequest) -> RecommendationResponse:
    """
    Create a recommendation.

    Args:
        item: RecommendationCreateRequest with title, description, address,
              categoryId and optional website / imageUrl

    Returns:
        The created RecommendationResponse, category included

    Raises:
        HTTPException 400: If categoryId does not reference an existing category
        HTTPException 500: If the store rejects the insert

    Example:
        ```bash
        POST /recommendations
        Body: {
            "title": "Blue Bottle",
            "description": "Great pour-over coffee",
            "address": "1 Main St",
            "categoryId": "5f0c6c1e-...",
            "website": "https://bluebottlecoffee.com"
        }
        ```
    """
    try:
        created = db_create_recommendation(item.model_dump())
    except UnknownCategoryError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        ) from e
    except SQLAlchemyError as e:
        logger.error("Error creating recommendation: %s", e, exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create recommendation",
        ) from e

    return RecommendationResponse.model_validate(created)


@app.get("/health", response_model=HealthResponse, tags=["health"])
def health() -> HealthResponse:
    """
    Health check endpoint for monitoring and status checks.

    Returns:
        HealthResponse with API metadata, uptime and store status.
        Always returns 200 OK if the endpoint is reachable.
    """
    uptime_seconds = int(time.time() - _APP_START_TIME)

    try:
        recommendations_count = db_count_recommendations()
    except SQLAlchemyError as e:
        logger.warning(f"Health check could not reach the database: {e}")
        recommendations_count = -1

    return HealthResponse(
        status="ok",
        name=API_NAME,
        version=API_VERSION,
        uptime_seconds=uptime_seconds,
        database_scheme=get_config_summary()["database_scheme"],
        recommendations_count=recommendations_count,
    )


@app.get("/")
def root():
    """
    Root endpoint providing API information.

    Returns:
        Dictionary with API name, version and docs location
    """
    return {
        "name": API_NAME,
        "version": API_VERSION,
        "description": API_DESCRIPTION,
        "docs": "/docs",
    }
