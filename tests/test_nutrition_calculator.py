"""Tests for nutrition lookup and scaling."""

import pytest
from pydantic import ValidationError

from nutrition_engine.reference.nutrition_table import nutrient
from nutrition_engine.services.nutrition import (
    NutritionCalculator,
    macronutrient_ratios,
)
from nutrition_engine.services.units import UnknownUnitError
from tests.conftest import make_entry


def _amount(result, nutrient_id: str) -> float:
    return next(n.amount for n in result.nutrients if n.id == nutrient_id)


def test_apple_piece_scales_reference_profile(calculator: NutritionCalculator) -> None:
    result = calculator.compute_nutrition("Apple", 1, "pieces")

    assert result.matched_profile == "Apple"
    assert result.grams_equivalent == 182
    assert result.calories == pytest.approx(52 * 1.82)
    assert _amount(result, "carbs") == pytest.approx(14 * 1.82)


def test_grams_scale_linearly(calculator: NutritionCalculator) -> None:
    result = calculator.compute_nutrition("salmon", 200, "grams")

    assert result.matched_profile == "Salmon"
    assert result.calories == pytest.approx(416)
    assert _amount(result, "omega-3") == pytest.approx(4.6)


def test_name_matching_is_bidirectional(calculator: NutritionCalculator) -> None:
    assert calculator.find_profile("grilled chicken breast").name == "Chicken Breast"
    assert calculator.find_profile("yogurt").name == "Greek Yogurt"
    assert calculator.find_profile("   ") is None


def test_override_units_feed_nutrition(calculator: NutritionCalculator) -> None:
    result = calculator.compute_nutrition("broccoli", 1, "cups")

    assert result.grams_equivalent == 91
    assert result.calories == pytest.approx(34 * 0.91)


def test_unknown_food_uses_generic_profile(calculator: NutritionCalculator) -> None:
    result = calculator.compute_nutrition("dragonfruit", 3, "pieces")

    assert result.matched_profile is None
    assert result.calories == 100
    assert result.grams_equivalent == 100
    assert {n.id for n in result.nutrients} == {"protein", "carbs", "fat", "fiber"}


def test_unknown_unit_raises_for_known_food(calculator: NutritionCalculator) -> None:
    with pytest.raises(UnknownUnitError):
        calculator.compute_nutrition("salmon", 1, "furlongs")


def test_count_unit_without_override_keeps_reference_amount(
    calculator: NutritionCalculator,
) -> None:
    result = calculator.compute_nutrition("quinoa", 2, "pieces")

    assert result.grams_equivalent == 100
    assert result.calories == 120


def test_count_unit_uses_configured_grams_per_piece() -> None:
    calculator = NutritionCalculator(default_grams_per_piece=30)

    result = calculator.compute_nutrition("quinoa", 2, "pieces")

    assert result.grams_equivalent == 60
    assert result.calories == pytest.approx(72)


def test_summarize_totals_and_daily_values(calculator: NutritionCalculator) -> None:
    entries = [
        make_entry("salmon", calories=200, protein=20, fat=10, vitamin_c=30),
        make_entry("orange", calories=60, carbs=15, fiber=3, vitamin_c=15, iron=9),
    ]

    summary = calculator.summarize(entries)

    assert summary.total_calories == 260
    assert summary.protein_g == 20
    assert summary.carbs_g == 15
    assert summary.fat_g == 10
    assert summary.fiber_g == 3
    assert summary.vitamins == {"vitamin-c": 45}
    assert summary.minerals == {"iron": 9}
    assert summary.daily_value_percentages["vitamin-c"] == pytest.approx(50)
    assert summary.daily_value_percentages["iron"] == pytest.approx(50)


def test_summarize_empty(calculator: NutritionCalculator) -> None:
    summary = calculator.summarize([])

    assert summary.total_calories == 0
    assert summary.vitamins == {}
    assert summary.daily_value_percentages == {}


def test_non_positive_quantity_is_rejected(calculator: NutritionCalculator) -> None:
    with pytest.raises(ValueError):
        calculator.compute_nutrition("salmon", -1, "grams")
    with pytest.raises(ValueError):
        calculator.compute_nutrition("salmon", 0, "grams")


def test_scaled_amount_is_validated() -> None:
    assert nutrient("protein", 2).scaled(1.5).amount == 3

    with pytest.raises(ValidationError):
        nutrient("protein", 2).scaled(-1)


def test_plural_food_name_falls_back_to_reference_amount(
    calculator: NutritionCalculator,
) -> None:
    result = calculator.compute_nutrition("2 apples", 2, "pieces")

    assert result.matched_profile == "Apple"
    assert result.grams_equivalent == 100
    assert result.calories == 52


def test_fried_chicken_gains_calories_and_fat(calculator: NutritionCalculator) -> None:
    result = calculator.compute_nutrition("chicken breast", 100, "grams", "fried")

    assert result.cooking_state == "fried"
    assert result.calories == pytest.approx(165 * 1.3)
    assert _amount(result, "fat") == pytest.approx(3.6 * 1.5)
    assert _amount(result, "protein") == pytest.approx(31 * 0.95)
    assert _amount(result, "sodium") == pytest.approx(74)
    assert _amount(result, "calcium") == pytest.approx(15 * 0.9)
    assert _amount(result, "niacin") == pytest.approx(14.8 * 0.7)
    assert _amount(result, "cholesterol") == pytest.approx(85)


def test_boiling_leaches_water_soluble_vitamins(
    calculator: NutritionCalculator,
) -> None:
    result = calculator.compute_nutrition("broccoli", 100, "grams", "Boiled ")

    assert result.cooking_state == "boiled"
    assert result.calories == pytest.approx(34)
    assert _amount(result, "vitamin-c") == pytest.approx(89.2 * 0.5)
    assert _amount(result, "vitamin-k") == pytest.approx(101.6 * 0.7)
    assert _amount(result, "fiber") == pytest.approx(2.6 * 0.8)
    assert _amount(result, "carbs") == pytest.approx(7 * 1.1)


def test_unknown_cooking_state_keeps_raw_values(
    calculator: NutritionCalculator,
) -> None:
    raw = calculator.compute_nutrition("salmon", 150, "grams")
    charred = calculator.compute_nutrition("salmon", 150, "grams", "charred")

    assert charred.cooking_state == "raw"
    assert charred == raw


def test_macronutrient_ratios_use_calories_per_gram(
    calculator: NutritionCalculator,
) -> None:
    summary = calculator.summarize(
        [make_entry("lunch", protein=20, carbs=40, fat=10)]
    )

    ratios = macronutrient_ratios(summary)

    assert ratios.protein_percentage == pytest.approx(80 / 330 * 100)
    assert ratios.carb_percentage == pytest.approx(160 / 330 * 100)
    assert ratios.fat_percentage == pytest.approx(90 / 330 * 100)


def test_detailed_summary_groups_and_scores_a_sparse_day(
    calculator: NutritionCalculator,
) -> None:
    entries = [
        make_entry(
            "salmon",
            calories=200,
            category="protein",
            protein=20,
            fat=10,
            vitamin_d=10,
            sodium=500,
        ),
        make_entry("rice", calories=100, category="grains", carbs=40, fiber=2, iron=9),
    ]

    detailed = calculator.detailed_summary(entries)

    assert detailed.summary == calculator.summarize(entries)
    groups = detailed.micronutrients
    fat_soluble = [(n.id, n.amount) for n in groups.fat_soluble_vitamins]
    assert fat_soluble == [("vitamin-d", 10)]
    assert groups.water_soluble_vitamins == []
    assert [n.id for n in groups.major_minerals] == ["sodium"]
    assert [n.id for n in groups.trace_minerals] == ["iron"]

    quality = detailed.quality
    # Low variety -5, moderate sodium +5.
    assert quality.score == 50
    assert quality.factors == ["Moderate sodium intake"]
    assert quality.warnings == ["Low fiber intake - may impact digestive health"]
    assert "Include foods from more diverse categories" in quality.recommendations
    assert "Include more nutrient-dense foods" in quality.recommendations


def test_detailed_summary_rewards_a_varied_nutrient_dense_day(
    calculator: NutritionCalculator,
) -> None:
    entries = [
        make_entry("orange", category="fruits", vitamin_c=15, folate=100),
        make_entry(
            "kale", category="vegetables", vitamin_c=15, vitamin_a=200, fiber=20
        ),
        make_entry("oats", category="grains", fiber=10, iron=5, magnesium=100, zinc=3),
        make_entry(
            "sardines",
            category="protein",
            vitamin_d=5,
            vitamin_e=4,
            calcium=300,
            selenium=15,
        ),
    ]

    detailed = calculator.detailed_summary(entries)

    water_soluble = detailed.micronutrients.water_soluble_vitamins
    assert [(n.id, n.amount) for n in water_soluble] == [
        ("vitamin-c", 30),
        ("folate", 100),
    ]
    # Variety +15, fiber +10, moderate sodium +5, rich micronutrients +15.
    assert detailed.quality.score == 95
    assert detailed.quality.factors == [
        "Good food variety across categories",
        "Excellent fiber intake",
        "Moderate sodium intake",
        "Rich in essential vitamins and minerals",
    ]
    assert detailed.quality.warnings == []
    assert detailed.quality.recommendations == []


def test_detailed_summary_high_sodium_warns(calculator: NutritionCalculator) -> None:
    detailed = calculator.detailed_summary(
        [make_entry("instant noodles", category="grains", sodium=2500, fiber=20)]
    )

    assert "High sodium intake - may increase blood pressure risk" in (
        detailed.quality.warnings
    )
    assert "Good fiber intake" in detailed.quality.factors
    # Low variety -5, good fiber +5, high sodium -10.
    assert detailed.quality.score == 40


def test_detailed_summary_empty(calculator: NutritionCalculator) -> None:
    detailed = calculator.detailed_summary([])

    assert detailed.macronutrient_ratios.protein_percentage == 0
    assert detailed.macronutrient_ratios.fat_percentage == 0
    assert detailed.micronutrients.trace_minerals == []
    assert 0 <= detailed.quality.score <= 100
