"""Nutrient totals across food entries."""

from collections import defaultdict
from collections.abc import Iterable

from nutrition_engine.domain.foods import FoodEntry

CALORIES_PER_GRAM_PROTEIN = 4


def nutrient_of(entry: FoodEntry, nutrient_id: str) -> float:
    """Return the amount of a nutrient in one entry, or 0 when absent."""
    return total_of([entry], nutrient_id)


def total_of(entries: Iterable[FoodEntry], nutrient_id: str) -> float:
    """Sum a nutrient across entries by nutrient id."""
    return sum(
        (
            nutrient.amount
            for entry in entries
            for nutrient in entry.nutrients
            if nutrient.id == nutrient_id
        ),
        0.0,
    )


def total_calories(entries: Iterable[FoodEntry]) -> float:
    """Sum the calories of all entries."""
    return sum((entry.calories for entry in entries), 0.0)


def protein_calorie_ratio(entries: Iterable[FoodEntry]) -> float:
    """Return the percentage of calories coming from protein (0 without calories)."""
    materialized = list(entries)
    calories = total_calories(materialized)
    if calories == 0:
        return 0.0
    protein = total_of(materialized, "protein")
    return protein * CALORIES_PER_GRAM_PROTEIN / calories * 100


def nutrient_totals(entries: Iterable[FoodEntry]) -> dict[str, float]:
    """Return totals for every nutrient id present in the entries."""
    totals: dict[str, float] = defaultdict(float)
    for entry in entries:
        for nutrient in entry.nutrients:
            totals[nutrient.id] += nutrient.amount
    return dict(totals)


def count_in_category(entries: Iterable[FoodEntry], category: str) -> int:
    """Count entries logged under a category."""
    return sum(1 for entry in entries if entry.category == category)
