"""Tests for fertility scoring."""

import pytest

from nutrition_engine.domain.scores import NutritionalSupport
from nutrition_engine.reference import fertility as fertility_ref
from nutrition_engine.services.scoring.fertility import (
    female_fertility_scorer,
    male_fertility_scorer,
    nutritional_support,
)
from tests.conftest import make_entry


def test_female_nutrient_dense_day() -> None:
    entries = [
        make_entry(
            "spinach salad",
            calories=100,
            category="vegetables",
            folate=400,
            iron=18,
            vitamin_d=15,
            omega_3=1.0,
            antioxidants=6,
        )
    ]

    result = female_fertility_scorer().analyze(entries)

    # Folate +15, iron +10, vitamin D +5, omega-3 +10, antioxidants +5, spinach +3.
    assert result.score == 98
    assert result.reproductive_health == 95
    assert result.hormonal_balance == 95
    assert result.nutritional_support is NutritionalSupport.OPTIMAL
    assert result.fertility_foods == ["spinach"]
    assert result.harmful_foods == []
    assert result.warnings == []


def test_female_harmful_foods_penalized_once_per_keyword() -> None:
    entries = [make_entry("light beer"), make_entry("red wine")]

    result = female_fertility_scorer().analyze(entries)

    # Folate -10, iron -10, wine -5, beer -5.
    assert result.score == 20
    assert result.harmful_foods == ["wine", "beer"]
    assert result.nutritional_support is NutritionalSupport.NEEDS_IMPROVEMENT
    alcohol_warnings = [w for w in result.warnings if w.startswith("Alcohol")]
    assert len(alcohol_warnings) == 1
    assert any("fertility-supporting foods" in r for r in result.recommendations)


def test_male_nutrient_dense_day() -> None:
    entries = [
        make_entry(
            "oysters",
            calories=80,
            zinc=16,
            selenium=60,
            vitamin_c=90,
            vitamin_e=15,
        )
    ]

    result = male_fertility_scorer().analyze(entries)

    # Zinc +15, selenium +10, vitamin C +5, vitamin E +5, oysters +3.
    assert result.score == 88
    assert result.fertility_foods == ["oysters"]
    assert result.nutritional_support is NutritionalSupport.OPTIMAL
    assert "Great zinc intake supports sperm production" in result.recommendations


def test_male_low_zinc_warns() -> None:
    result = male_fertility_scorer().analyze([make_entry("white rice", carbs=40)])

    assert "Low zinc intake may reduce sperm quality" in result.warnings
    assert result.score == 40
    assert 0 <= result.reproductive_health <= 100
    assert 0 <= result.hormonal_balance <= 100


def test_nutritional_support_thresholds() -> None:
    assert nutritional_support(80) is NutritionalSupport.OPTIMAL
    assert nutritional_support(79.9) is NutritionalSupport.GOOD
    assert nutritional_support(60) is NutritionalSupport.GOOD
    assert nutritional_support(59.9) is NutritionalSupport.NEEDS_IMPROVEMENT


def test_male_zinc_warning_starts_below_low_threshold() -> None:
    scorer = male_fertility_scorer()
    warning = "Low zinc intake may reduce sperm quality"
    below = make_entry("rice", zinc=fertility_ref.ZINC_LOW_MG - 0.5)
    at = make_entry("rice", zinc=fertility_ref.ZINC_LOW_MG)

    assert warning in scorer.analyze([below]).warnings
    assert warning not in scorer.analyze([at]).warnings


def test_low_thresholds_come_from_reference_tables(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    entries = [make_entry("lentils", iron=12, zinc=9)]
    assert "Low iron intake may affect ovulation" not in (
        female_fertility_scorer().analyze(entries).warnings
    )

    monkeypatch.setattr(fertility_ref, "IRON_LOW_MG", 15)
    monkeypatch.setattr(fertility_ref, "ZINC_LOW_MG", 10)

    assert "Low iron intake may affect ovulation" in (
        female_fertility_scorer().analyze(entries).warnings
    )
    assert "Low zinc intake may reduce sperm quality" in (
        male_fertility_scorer().analyze(entries).warnings
    )
