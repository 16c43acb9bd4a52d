"""Tests for cooking-state adjustments."""

import pytest

from nutrition_engine.reference.nutrition_table import nutrient
from nutrition_engine.services.cooking import (
    adjust_for_cooking,
    describe_cooking_state,
    normalize_cooking_state,
    nutrient_multiplier,
)


def test_normalize_cooking_state() -> None:
    assert normalize_cooking_state(None) == "raw"
    assert normalize_cooking_state("") == "raw"
    assert normalize_cooking_state(" Steamed ") == "steamed"
    assert normalize_cooking_state("sous vide") == "raw"


def test_vitamin_retention_depends_on_method() -> None:
    vitamin_c = nutrient("vitamin-c", 10)

    assert nutrient_multiplier(vitamin_c, "steamed") == 0.85
    assert nutrient_multiplier(vitamin_c, "boiled") == 0.5
    assert nutrient_multiplier(nutrient("thiamine", 1), "boiled") == 0.6
    assert nutrient_multiplier(nutrient("vitamin-d", 1), "grilled") == 1.0


def test_states_without_retention_data_use_general_multipliers() -> None:
    # "processed" has no method-specific vitamin retention.
    assert nutrient_multiplier(nutrient("vitamin-c", 1), "processed") == 1.0
    assert nutrient_multiplier(nutrient("iron", 1), "processed") == 0.8
    assert nutrient_multiplier(nutrient("omega-3", 1), "processed") == 1.0


def test_sodium_and_sugar_are_stable() -> None:
    assert nutrient_multiplier(nutrient("sodium", 400), "dried") == 1.0
    assert nutrient_multiplier(nutrient("sugar", 10), "dried") == 1.0


def test_adjust_for_cooking_scales_calories_and_nutrients() -> None:
    calories, nutrients = adjust_for_cooking(
        100, [nutrient("fat", 10), nutrient("protein", 20)], "grilled"
    )

    assert calories == pytest.approx(95)
    assert [n.amount for n in nutrients] == pytest.approx([8.5, 18])


def test_raw_adjustment_is_identity() -> None:
    raw_nutrients = [nutrient("vitamin-c", 30), nutrient("iron", 2)]

    calories, nutrients = adjust_for_cooking(250, raw_nutrients, None)

    assert calories == 250
    assert nutrients == raw_nutrients


def test_describe_cooking_state() -> None:
    assert describe_cooking_state("fried") == "Fried in oil/fat"
    assert describe_cooking_state("unknown") == "Raw, uncooked state"
