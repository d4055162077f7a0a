"""
Categories router.

This router provides the read-only category listing used to populate the
category selector of the submission form:
- GET /categories - List all categories ordered by name

Categories are created by the seed command (python -m recommendations.seed);
there is no write endpoint.
"""

import logging
from typing import List

from fastapi import APIRouter, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError

from api.schemas import CategoryResponse
from recommendations.db import db_list_categories

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/categories", tags=["categories"])


@router.get(
    "",
    response_model=List[CategoryResponse],
    summary="List categories",
    description="Retrieve every category, ordered by name.",
)
def list_categories() -> List[CategoryResponse]:
    """
    List all categories.

    Returns:
        List of CategoryResponse models ordered by name

    Raises:
        HTTPException 500: If the store cannot be read
    """
    try:
        categories = db_list_categories()
    except SQLAlchemyError as e:
        logger.error("Error fetching categories: %s", e, exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch categories",
        ) from e

    return [CategoryResponse.model_validate(category) for category in categories]
