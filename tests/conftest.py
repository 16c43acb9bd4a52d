"""Shared test fixtures."""

import random

import pytest

from nutrition_engine.config import Settings
from nutrition_engine.domain.foods import FoodEntry
from nutrition_engine.reference.nutrition_table import nutrient
from nutrition_engine.services.analysis import HealthAnalysisService
from nutrition_engine.services.glycemic import GlycemicEngine
from nutrition_engine.services.nutrition import NutritionCalculator
from nutrition_engine.services.units import UnitConversionResolver

_RANDOM_NAMES = (
    "apple",
    "white rice",
    "salmon fillet",
    "potato chips",
    "spinach salad",
    "light beer",
    "oysters",
    "mystery stew",
    "sweet potato",
    "greek yogurt",
)
_RANDOM_CATEGORIES = ("", "fruits", "vegetables", "grains", "protein", "snacks")
_RANDOM_NUTRIENTS = (
    "protein",
    "carbs",
    "fat",
    "saturated-fat",
    "fiber",
    "sodium",
    "vitamin-c",
    "vitamin-d",
    "vitamin-e",
    "folate",
    "iron",
    "magnesium",
    "zinc",
    "selenium",
    "omega-3",
    "antioxidants",
)


def make_entry(
    name: str,
    calories: float = 0.0,
    category: str = "",
    quantity: float = 1.0,
    unit: str = "grams",
    taxonomy_key: str | None = None,
    **nutrients: float,
) -> FoodEntry:
    """Build an entry; nutrient kwargs use underscores for hyphens."""
    return FoodEntry(
        name=name,
        quantity=quantity,
        unit=unit,
        calories=calories,
        category=category,
        taxonomy_key=taxonomy_key,
        nutrients=tuple(
            nutrient(key.replace("_", "-"), amount) for key, amount in nutrients.items()
        ),
    )


def random_entries(rng: random.Random, count: int) -> list[FoodEntry]:
    """Generate entries with random names, categories and nutrient amounts."""
    entries: list[FoodEntry] = []
    for _ in range(count):
        chosen = rng.sample(_RANDOM_NUTRIENTS, k=rng.randint(0, len(_RANDOM_NUTRIENTS)))
        entries.append(
            FoodEntry(
                name=rng.choice(_RANDOM_NAMES),
                quantity=rng.uniform(0.1, 5),
                unit="grams",
                calories=rng.choice([0.0, rng.uniform(0, 2500)]),
                category=rng.choice(_RANDOM_CATEGORIES),
                nutrients=tuple(
                    nutrient(nutrient_id, rng.uniform(0, 500)) for nutrient_id in chosen
                ),
            )
        )
    return entries


@pytest.fixture
def resolver() -> UnitConversionResolver:
    return UnitConversionResolver()


@pytest.fixture
def calculator(resolver: UnitConversionResolver) -> NutritionCalculator:
    return NutritionCalculator(resolver=resolver)


@pytest.fixture
def glycemic() -> GlycemicEngine:
    return GlycemicEngine()


@pytest.fixture
def analysis_service() -> HealthAnalysisService:
    return HealthAnalysisService()


@pytest.fixture
def settings() -> Settings:
    return Settings(environment="test", log_level="WARNING")
