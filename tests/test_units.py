"""Tests for unit conversion."""

import pytest

from nutrition_engine.domain.units import BaseUnit, ConversionResult
from nutrition_engine.services.units import (
    UnitConversionResolver,
    UnknownUnitError,
    contains_word,
    convert_to_base_unit,
    safe_convert_to_base_unit,
    validate_unit,
)


def test_apple_piece_uses_override(resolver: UnitConversionResolver) -> None:
    result = resolver.convert(1, "pieces", "apple")

    assert result == ConversionResult(grams=182)
    assert result.base_unit is BaseUnit.GRAMS


def test_bread_slices_use_override(resolver: UnitConversionResolver) -> None:
    assert resolver.convert(2, "slices", "bread").grams == 56


def test_pineapple_does_not_match_apple(resolver: UnitConversionResolver) -> None:
    result = resolver.convert(1, "pieces", "pineapple")

    assert result.grams is None
    assert result.pieces == 1
    assert result.base_unit is BaseUnit.PIECES


def test_plural_name_does_not_match_singular_override(
    resolver: UnitConversionResolver,
) -> None:
    result = resolver.convert(2, "pieces", "2 apples")

    assert result.grams is None
    assert result.pieces == 2


def test_unknown_unit_raises() -> None:
    with pytest.raises(UnknownUnitError) as excinfo:
        convert_to_base_unit(5, "furlongs")

    assert excinfo.value.unit == "furlongs"
    assert "furlongs" in str(excinfo.value)


def test_safe_convert_assumes_grams_for_unknown_unit() -> None:
    result = safe_convert_to_base_unit(5, "furlongs")

    assert result.grams == 5
    assert result.is_valid is False


def test_safe_convert_matches_strict_for_known_unit() -> None:
    assert safe_convert_to_base_unit(2, "ounces") == convert_to_base_unit(2, "ounces")


def test_weight_and_volume_defaults(resolver: UnitConversionResolver) -> None:
    assert resolver.convert(2, "ounces").grams == pytest.approx(56.7)
    assert resolver.convert(1, "kilograms").grams == 1000
    assert resolver.convert(2, "cups").milliliters == 480
    assert resolver.convert(3, "teaspoons", "sugar").milliliters == 15


def test_override_wins_over_volume_default(resolver: UnitConversionResolver) -> None:
    assert resolver.convert(1, "fluidOunces", "whole milk").grams == 30
    assert resolver.convert(1, "fluidOunces", "orange juice").milliliters == 29.57


def test_override_search_skips_keys_without_the_unit(
    resolver: UnitConversionResolver,
) -> None:
    # "apple" has no cup override, so the next matching keyword is used.
    assert resolver.convert(1, "cups", "apple rice").grams == 185


def test_food_without_unit_override_uses_category(
    resolver: UnitConversionResolver,
) -> None:
    assert resolver.convert(1, "cups", "apple").milliliters == 240


def test_convert_is_idempotent(resolver: UnitConversionResolver) -> None:
    first = resolver.convert(3, "slices", "cheese")
    second = resolver.convert(3, "slices", "cheese")

    assert first == second
    assert first.grams == 84


def test_custom_override_table() -> None:
    resolver = UnitConversionResolver(overrides={"mango": {"pieces": 200}})

    assert resolver.convert(2, "pieces", "ripe mango").grams == 400
    assert resolver.convert(1, "pieces", "apple").pieces == 1


def test_conversion_result_requires_one_quantity() -> None:
    with pytest.raises(ValueError):
        ConversionResult()
    with pytest.raises(ValueError):
        ConversionResult(grams=1, milliliters=1)


def test_validate_unit() -> None:
    assert validate_unit("cups") is True
    assert validate_unit("furlongs") is False


def test_contains_word_uses_boundaries() -> None:
    assert contains_word("Green Apple", "apple") is True
    assert contains_word("pineapple", "apple") is False


def test_units_for_food_orders_recommendations(
    resolver: UnitConversionResolver,
) -> None:
    assert resolver.units_for_food("apple") == ["pieces", "slices", "grams", "ounces"]


def test_units_for_unknown_food(resolver: UnitConversionResolver) -> None:
    assert resolver.units_for_food("quinoa") == ["grams", "ounces"]


def test_units_for_liquid_food(resolver: UnitConversionResolver) -> None:
    units = resolver.units_for_food("orange juice")

    assert units[0] == "cups"
    assert "milliliters" in units
    assert "fluidOunces" in units


def test_portion_suggestions(resolver: UnitConversionResolver) -> None:
    suggestions = resolver.portion_suggestions("banana smoothie")

    assert suggestions[0].unit == "pieces"
    assert suggestions[1].amount == 118


def test_portion_suggestions_default(resolver: UnitConversionResolver) -> None:
    suggestions = resolver.portion_suggestions("kombucha")

    assert [s.unit for s in suggestions] == ["grams", "ounces"]
