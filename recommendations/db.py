"""
Database persistence layer for categories and recommendations.

This module maps the two record types onto SQLAlchemy ORM tables and exposes a
small set of repository functions returning plain dictionaries. The store is
selected by the DATABASE_URL environment variable (see api.config.DatabaseConfig);
without it a local SQLite file is used.

Tables:
- categories: one row per category, unique name
- recommendations: one row per recommendation, foreign key to categories

Only create and read operations exist. Recommendations are listed newest first.
"""

import logging
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from sqlalchemy import Column, DateTime, ForeignKey, Index, String, Text, create_engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import declarative_base, joinedload, relationship, sessionmaker
from sqlalchemy.pool import StaticPool

from api.config import DatabaseConfig

logger = logging.getLogger(__name__)

Base = declarative_base()

# Database engine and session factory (rebuilt by configure_database)
engine = None
SessionLocal = None


class UnknownCategoryError(ValueError):
    """Raised when a recommendation references a category that does not exist."""

    def __init__(self, category_id: str):
        super().__init__(f"Unknown category: {category_id}")
        self.category_id = category_id


def _new_id() -> str:
    return str(uuid.uuid4())


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class CategoryRow(Base):
    """Categories table - one row per named grouping."""
    __tablename__ = "categories"

    id = Column(String(36), primary_key=True, default=_new_id)
    name = Column(String(255), unique=True, index=True, nullable=False)

    recommendations = relationship("RecommendationRow", back_populates="category")


class RecommendationRow(Base):
    """Recommendations table - stores submitted places."""
    __tablename__ = "recommendations"

    id = Column(String(36), primary_key=True, default=_new_id)
    title = Column(String(500), nullable=False)
    description = Column(Text, nullable=False)
    address = Column(String(1000), nullable=False)
    category_id = Column(String(36), ForeignKey("categories.id"), nullable=False, index=True)
    website = Column(String(2000), nullable=True)
    image_url = Column(String(2000), nullable=True)
    created_at = Column(DateTime, default=_utcnow, nullable=False)

    category = relationship("CategoryRow", back_populates="recommendations")

    # Listing is always newest first
    __table_args__ = (
        Index("idx_recommendation_created_at", "created_at"),
    )


def configure_database(url: Optional[str] = None, echo: Optional[bool] = None) -> None:
    """
    (Re)create the engine and session factory for the given database URL.

    SQLite connections are shared with FastAPI's worker threads, so
    check_same_thread is disabled. In-memory SQLite uses a StaticPool so every
    session sees the same database.

    Args:
        url: SQLAlchemy database URL (default: DatabaseConfig.get_url())
        echo: Log SQL statements (default: DatabaseConfig.get_echo())
    """
    global engine, SessionLocal

    url = url or DatabaseConfig.get_url()
    echo = DatabaseConfig.get_echo() if echo is None else echo

    engine_kwargs: Dict[str, Any] = {"echo": echo}
    if url.startswith("sqlite"):
        engine_kwargs["connect_args"] = {"check_same_thread": False}
        if url in ("sqlite://", "sqlite:///:memory:"):
            engine_kwargs["poolclass"] = StaticPool
    else:
        engine_kwargs["pool_pre_ping"] = True

    if engine is not None:
        engine.dispose()

    engine = create_engine(url, **engine_kwargs)
    SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    logger.info("Database engine configured (scheme=%s)", url.split(":", 1)[0])


def init_db() -> None:
    """
    Initialize database tables (create if they don't exist).

    Safe to call multiple times - it only creates tables that don't already exist.

    Raises:
        SQLAlchemyError: If the connection or table creation fails
    """
    try:
        Base.metadata.create_all(bind=engine)
        logger.info("Database tables initialized (or already exist)")
    except SQLAlchemyError as e:
        logger.error(f"Failed to initialize database tables: {e}")
        raise


def get_db_session():
    """
    Get a database session.

    Returns:
        SQLAlchemy Session object
    """
    return SessionLocal()


configure_database()


# ============================================================================
# Row conversion
# ============================================================================

def _category_to_dict(row: CategoryRow) -> Dict[str, Any]:
    return {"id": row.id, "name": row.name}


def _recommendation_to_dict(row: RecommendationRow) -> Dict[str, Any]:
    return {
        "id": row.id,
        "title": row.title,
        "description": row.description,
        "address": row.address,
        "category_id": row.category_id,
        "category": _category_to_dict(row.category),
        "website": row.website,
        "image_url": row.image_url,
        "created_at": row.created_at,
    }


# ============================================================================
# Category Repository Functions
# ============================================================================

def db_list_categories() -> List[dict]:
    """
    Get all categories ordered by name.

    Returns:
        List of category dictionaries with "id" and "name"
    """
    db = get_db_session()
    try:
        rows = db.query(CategoryRow).order_by(CategoryRow.name.asc()).all()
        return [_category_to_dict(row) for row in rows]
    finally:
        db.close()


def db_get_category(category_id: str) -> Optional[dict]:
    """
    Look up a single category.

    Args:
        category_id: Category identifier

    Returns:
        Category dictionary, or None if no such category exists
    """
    db = get_db_session()
    try:
        row = db.get(CategoryRow, category_id)
        return _category_to_dict(row) if row else None
    finally:
        db.close()


def db_upsert_category(name: str) -> dict:
    """
    Create a category by name, or return the existing one.

    Args:
        name: Category display name

    Returns:
        Category dictionary
    """
    db = get_db_session()
    try:
        row = db.query(CategoryRow).filter(CategoryRow.name == name).first()
        if row is None:
            row = CategoryRow(name=name)
            db.add(row)
            db.commit()
            db.refresh(row)
            logger.info("Created category %r", name)
        return _category_to_dict(row)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error upserting category {name!r}: {e}")
        raise
    finally:
        db.close()


# ============================================================================
# Recommendation Repository Functions
# ============================================================================

def db_create_recommendation(data: Dict[str, Any]) -> dict:
    """
    Insert a recommendation and return it with its category embedded.

    Args:
        data: Dictionary with title, description, address, category_id and
              optional website / image_url (empty values are stored as NULL)

    Returns:
        Created recommendation dictionary

    Raises:
        UnknownCategoryError: If category_id does not reference an existing category
        SQLAlchemyError: If the insert fails
    """
    db = get_db_session()
    try:
        category = db.get(CategoryRow, data["category_id"])
        if category is None:
            raise UnknownCategoryError(data["category_id"])

        row = RecommendationRow(
            title=data["title"],
            description=data["description"],
            address=data["address"],
            category_id=category.id,
            website=data.get("website") or None,
            image_url=data.get("image_url") or None,
        )
        db.add(row)
        db.commit()
        db.refresh(row)
        logger.info("Created recommendation %s (%r) in category %r", row.id, row.title, category.name)
        return _recommendation_to_dict(row)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error creating recommendation in database: {e}")
        raise
    finally:
        db.close()


def db_list_recommendations() -> List[dict]:
    """
    Get all recommendations with their categories, newest first.

    Returns:
        List of recommendation dictionaries ordered by created_at descending
    """
    db = get_db_session()
    try:
        rows = (
            db.query(RecommendationRow)
            .options(joinedload(RecommendationRow.category))
            .order_by(RecommendationRow.created_at.desc())
            .all()
        )
        return [_recommendation_to_dict(row) for row in rows]
    finally:
        db.close()


def db_count_recommendations() -> int:
    """
    Get the total number of stored recommendations.

    Returns:
        Number of recommendation rows
    """
    db = get_db_session()
    try:
        return db.query(RecommendationRow).count()
    finally:
        db.close()
