"""Tests for general health indicators."""

import math

from nutrition_engine.domain.scores import Level
from nutrition_engine.services.scoring.general import GeneralHealthScorer
from nutrition_engine.services.scoring.indicators import inflammation_level
from tests.conftest import make_entry


def test_empty_list_is_finite() -> None:
    scorer = GeneralHealthScorer()

    metabolic = scorer.metabolic_health([])
    result = scorer.analyze([])

    assert math.isfinite(metabolic)
    # GI defaults to 50, which counts as low GI.
    assert metabolic == 70
    assert result.score == result.metabolic_health == 70
    assert result.inflammation_level is Level.MODERATE
    assert result.oxidative_stress is Level.HIGH


def test_each_snack_subtracts_five() -> None:
    entries = [
        make_entry("potato chips", category="snacks"),
        make_entry("candy bar", category="snacks"),
    ]

    assert GeneralHealthScorer().metabolic_health(entries) == 60


def test_processed_day_has_high_inflammation() -> None:
    entries = [
        make_entry("soda", category="beverages"),
        make_entry("sugar cookies", category="snacks"),
        make_entry("fried food platter"),
    ]

    result = GeneralHealthScorer().analyze(entries)

    assert result.inflammation_level is Level.HIGH
    assert "Reduce processed foods and added sugars" in result.recommendations


def test_antioxidant_rich_day_has_low_oxidative_stress() -> None:
    entries = [
        make_entry(
            "blueberry smoothie",
            category="fruits",
            vitamin_c=80,
            vitamin_e=12,
            antioxidants=8,
        ),
        make_entry("broccoli", category="vegetables"),
    ]

    result = GeneralHealthScorer().analyze(entries)

    assert result.oxidative_stress is Level.LOW
    assert result.inflammation_level is Level.LOW


def test_inflammation_level_thresholds() -> None:
    assert inflammation_level(71) is Level.LOW
    assert inflammation_level(70) is Level.MODERATE
    assert inflammation_level(41) is Level.MODERATE
    assert inflammation_level(40) is Level.HIGH


def test_processed_day_reports_warnings() -> None:
    entries = [
        make_entry("soda", category="beverages"),
        make_entry("sugar cookies", category="snacks"),
        make_entry("fried food platter"),
    ]

    result = GeneralHealthScorer().analyze(entries)

    assert "Diet may promote chronic inflammation" in result.warnings
    assert "Processed snacks add refined carbs and sodium" in result.warnings
    assert "Low antioxidant intake may raise oxidative stress" in result.warnings


def test_balanced_day_has_no_warnings() -> None:
    entries = [
        make_entry(
            "salmon",
            calories=300,
            category="protein",
            protein=30,
            fiber=30,
            vitamin_c=80,
            vitamin_e=12,
            antioxidants=8,
        ),
        make_entry("broccoli", category="vegetables"),
    ]

    result = GeneralHealthScorer().analyze(entries)

    assert result.warnings == []
