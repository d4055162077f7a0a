"""
Shared pytest fixtures.

The store is pointed at an in-memory SQLite database before any application
module is imported, and every test starts with empty tables.
"""

import os

os.environ["DATABASE_URL"] = "sqlite://"

import pytest

from recommendations import db


@pytest.fixture(autouse=True)
def clean_db():
    """Drop and recreate all tables around each test."""
    db.Base.metadata.drop_all(bind=db.engine)
    db.Base.metadata.create_all(bind=db.engine)
    yield
    db.Base.metadata.drop_all(bind=db.engine)


@pytest.fixture
def categories():
    """The default categories, seeded into the store."""
    from recommendations.seed import seed_categories

    return {c["name"]: c for c in seed_categories()}


@pytest.fixture
def make_recommendation():
    """Factory building Recommendation models without touching the store."""
    from datetime import datetime, timedelta

    from recommendations.models import Category, Recommendation

    counter = {"n": 0}

    def _make(
        title="Place",
        description="A place",
        address="1 Main St",
        category="Restaurants",
        website=None,
        image_url=None,
    ):
        counter["n"] += 1
        n = counter["n"]
        return Recommendation(
            id=f"rec-{n}",
            title=title,
            description=description,
            address=address,
            category=Category(id=f"cat-{category.lower().replace(' ', '-')}", name=category),
            website=website,
            image_url=image_url,
            created_at=datetime(2024, 1, 1) - timedelta(minutes=n),
        )

    return _make
