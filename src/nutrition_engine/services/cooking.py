"""Adjust raw nutrition for the way a food was prepared."""

import logging
from collections.abc import Iterable

from nutrition_engine.domain.foods import NutrientAmount, NutrientCategory
from nutrition_engine.reference.cooking import (
    B_VITAMINS,
    COOKING_ADJUSTMENTS,
    COOKING_STABLE,
    COOKING_STATE_DESCRIPTIONS,
    FAT_SOLUBLE_RETENTION,
    RAW,
    WATER_SOLUBLE_RETENTION,
)

_logger = logging.getLogger(__name__)


def normalize_cooking_state(cooking_state: str | None) -> str:
    """Return a known cooking state, treating unknown or missing ones as raw."""
    if not cooking_state:
        return RAW
    state = cooking_state.strip().lower()
    if state not in COOKING_ADJUSTMENTS:
        _logger.debug("Unknown cooking state %r, using raw values", cooking_state)
        return RAW
    return state


def nutrient_multiplier(nutrient: NutrientAmount, cooking_state: str) -> float:
    """Return the retention multiplier for one nutrient in a cooking state."""
    state = normalize_cooking_state(cooking_state)
    adjustment = COOKING_ADJUSTMENTS[state]
    water = WATER_SOLUBLE_RETENTION.get(state, WATER_SOLUBLE_RETENTION[RAW])
    fat = FAT_SOLUBLE_RETENTION.get(state, FAT_SOLUBLE_RETENTION[RAW])

    specific = {
        "protein": adjustment.protein,
        "carbs": adjustment.carbs,
        "fat": adjustment.fat,
        "saturated-fat": adjustment.fat,
        "fiber": adjustment.fiber,
        "vitamin-c": water.vitamin_c,
        "folate": water.folate,
        "choline": water.choline,
        "vitamin-a": fat.vitamin_a,
        "vitamin-d": fat.vitamin_d,
        "vitamin-e": fat.vitamin_e,
        "vitamin-k": fat.vitamin_k,
    }
    if nutrient.id in specific:
        return specific[nutrient.id]
    if nutrient.id in B_VITAMINS:
        return water.b_vitamins
    if nutrient.id in COOKING_STABLE:
        return 1.0
    if nutrient.category is NutrientCategory.VITAMIN:
        return adjustment.vitamins
    if nutrient.category is NutrientCategory.MINERAL:
        return adjustment.minerals
    return 1.0


def adjust_for_cooking(
    calories: float, nutrients: Iterable[NutrientAmount], cooking_state: str | None
) -> tuple[float, list[NutrientAmount]]:
    """Apply cooking multipliers to calories and each nutrient."""
    state = normalize_cooking_state(cooking_state)
    adjusted = [
        nutrient.scaled(nutrient_multiplier(nutrient, state)) for nutrient in nutrients
    ]
    return calories * COOKING_ADJUSTMENTS[state].calories, adjusted


def describe_cooking_state(cooking_state: str | None) -> str:
    return COOKING_STATE_DESCRIPTIONS[normalize_cooking_state(cooking_state)]
