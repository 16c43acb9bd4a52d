"""Categorize foods from free-text names."""

from nutrition_engine.reference.categories import (
    CATEGORY_COMMON_FOODS,
    CATEGORY_KEYWORDS,
    DATABASE_CATEGORY_MAPPING,
    DEFAULT_CATEGORY,
)


def categorize_food_by_name(
    food_name: str, database_category: str | None = None
) -> str:
    """Return the category id for a food.

    A known storage-layer category wins; otherwise common foods are checked
    before broader keywords, and unmatched names fall back to grains.
    """
    if database_category and database_category in DATABASE_CATEGORY_MAPPING:
        return DATABASE_CATEGORY_MAPPING[database_category]

    name = food_name.lower()
    for table in (CATEGORY_COMMON_FOODS, CATEGORY_KEYWORDS):
        for category, keywords in table:
            if any(keyword in name for keyword in keywords):
                return category
    return DEFAULT_CATEGORY
