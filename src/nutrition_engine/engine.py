"""Module-level entry points for callers that do not wire a container.

The default container is built from ``Settings`` on first use, so
``NUTRITION_ENGINE_*`` environment variables apply here too.

Every ``analyze_*`` function accepts ``FoodEntry`` instances or plain
mappings shaped like stored entries (camelCase keys such as ``dateAdded``
are accepted). Malformed mappings raise ``pydantic.ValidationError``.
"""

from collections.abc import Iterable, Mapping
from functools import lru_cache
from typing import Any

from nutrition_engine.containers import EngineContainer, build_container
from nutrition_engine.domain.foods import FoodEntry
from nutrition_engine.domain.nutrition import (
    DetailedNutritionSummary,
    NutritionResult,
)
from nutrition_engine.domain.scores import (
    DiabetesScore,
    FertilityScore,
    GeneralHealthScore,
    HealthReport,
    PCOSScore,
)
from nutrition_engine.services.categories import categorize_food_by_name
from nutrition_engine.services.units import (
    UnknownUnitError,
    convert_to_base_unit,
    safe_convert_to_base_unit,
    validate_unit,
)

__all__ = [
    "UnknownUnitError",
    "analyze_all",
    "analyze_diabetes",
    "analyze_female_fertility",
    "analyze_general_health",
    "analyze_male_fertility",
    "analyze_pcos",
    "categorize_food_by_name",
    "compute_nutrition",
    "convert_to_base_unit",
    "detailed_summary",
    "safe_convert_to_base_unit",
    "to_entries",
    "validate_unit",
]

EntryInput = FoodEntry | Mapping[str, Any]


@lru_cache(maxsize=1)
def _container() -> EngineContainer:
    return build_container()


def to_entries(items: Iterable[EntryInput]) -> list[FoodEntry]:
    """Validate raw entry payloads into ``FoodEntry`` models."""
    return [
        item if isinstance(item, FoodEntry) else FoodEntry.model_validate(item)
        for item in items
    ]


def compute_nutrition(
    food_name: str, quantity: float, unit: str, cooking_state: str | None = None
) -> NutritionResult:
    return _container().calculator.compute_nutrition(
        food_name, quantity, unit, cooking_state
    )


def detailed_summary(entries: Iterable[EntryInput]) -> DetailedNutritionSummary:
    return _container().calculator.detailed_summary(to_entries(entries))


def analyze_pcos(entries: Iterable[EntryInput]) -> PCOSScore:
    return _container().analysis_service.analyze_pcos(to_entries(entries))


def analyze_diabetes(entries: Iterable[EntryInput]) -> DiabetesScore:
    return _container().analysis_service.analyze_diabetes(to_entries(entries))


def analyze_general_health(entries: Iterable[EntryInput]) -> GeneralHealthScore:
    return _container().analysis_service.analyze_general_health(to_entries(entries))


def analyze_female_fertility(entries: Iterable[EntryInput]) -> FertilityScore:
    return _container().analysis_service.analyze_female_fertility(to_entries(entries))


def analyze_male_fertility(entries: Iterable[EntryInput]) -> FertilityScore:
    return _container().analysis_service.analyze_male_fertility(to_entries(entries))


def analyze_all(entries: Iterable[EntryInput]) -> HealthReport:
    """Run every condition scorer over the same entries."""
    return _container().analysis_service.analyze_all(to_entries(entries))
