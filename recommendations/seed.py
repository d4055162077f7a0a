"""
Seed the store with the default recommendation categories.

Categories are upserted by name, so running the seed repeatedly is harmless.

Run with:
    python -m recommendations.seed
"""

import logging
from typing import List, Sequence

from recommendations.db import db_upsert_category, init_db

logger = logging.getLogger(__name__)

DEFAULT_CATEGORIES = (
    "Restaurants",
    "Bars",
    "Coffee Shops",
    "Parks",
    "Museums",
    "Shopping",
    "Entertainment",
)


def seed_categories(names: Sequence[str] = DEFAULT_CATEGORIES) -> List[dict]:
    """
    Ensure every category in names exists.

    Args:
        names: Category display names to create if missing

    Returns:
        List of category dictionaries, in the order of names
    """
    init_db()
    categories = [db_upsert_category(name) for name in names]
    logger.info("Seeded %d categories", len(categories))
    return categories


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    for category in seed_categories():
        print(f"{category['name']}: {category['id']}")
