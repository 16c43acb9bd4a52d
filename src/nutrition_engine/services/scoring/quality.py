"""Overall nutrition quality score for a list of entries."""

from collections.abc import Sequence
from dataclasses import dataclass

from nutrition_engine.domain.foods import FoodEntry
from nutrition_engine.domain.nutrition import NutritionQuality, NutritionSummary
from nutrition_engine.reference import quality as ref
from nutrition_engine.services.scoring.rules import Rule, apply_rules


@dataclass(frozen=True)
class QualityMetrics:
    """Inputs to the quality rules; percentages are of the daily value."""

    category_count: int
    fiber_percentage: float
    sodium_percentage: float
    vitamin_coverage: int
    mineral_coverage: int


def _rich(m: QualityMetrics) -> bool:
    return (
        m.vitamin_coverage >= ref.RICH_COVERAGE_COUNT
        and m.mineral_coverage >= ref.RICH_COVERAGE_COUNT
    )


def _good(m: QualityMetrics) -> bool:
    return (
        m.vitamin_coverage >= ref.GOOD_COVERAGE_COUNT
        and m.mineral_coverage >= ref.GOOD_COVERAGE_COUNT
    )


# ``advice`` carries the positive factors behind the score.
QUALITY_RULES: tuple[Rule[QualityMetrics], ...] = (
    Rule(
        "variety",
        lambda m: m.category_count >= ref.VARIETY_CATEGORY_COUNT,
        15,
        advice=("Good food variety across categories",),
    ),
    Rule(
        "low_variety",
        lambda m: m.category_count < ref.VARIETY_CATEGORY_COUNT,
        -5,
        recommendations=("Include foods from more diverse categories",),
    ),
    Rule(
        "fiber_excellent",
        lambda m: m.fiber_percentage >= 100,
        10,
        advice=("Excellent fiber intake",),
    ),
    Rule(
        "fiber_good",
        lambda m: 70 <= m.fiber_percentage < 100,
        5,
        advice=("Good fiber intake",),
    ),
    Rule(
        "fiber_low",
        lambda m: m.fiber_percentage < 70,
        warnings=("Low fiber intake - may impact digestive health",),
        recommendations=(
            "Add more high-fiber foods like vegetables, fruits, and whole grains",
        ),
    ),
    Rule(
        "sodium_high",
        lambda m: m.sodium_percentage > 100,
        -10,
        warnings=("High sodium intake - may increase blood pressure risk",),
        recommendations=("Reduce processed foods and added salt",),
    ),
    Rule(
        "sodium_moderate",
        lambda m: m.sodium_percentage < 50,
        5,
        advice=("Moderate sodium intake",),
    ),
    Rule(
        "micronutrients_rich",
        _rich,
        15,
        advice=("Rich in essential vitamins and minerals",),
    ),
    Rule(
        "micronutrients_good",
        lambda m: _good(m) and not _rich(m),
        5,
        advice=("Good micronutrient profile",),
    ),
    Rule(
        "micronutrients_sparse",
        lambda m: not _good(m),
        recommendations=("Include more nutrient-dense foods",),
    ),
)


def quality_metrics(
    entries: Sequence[FoodEntry], summary: NutritionSummary
) -> QualityMetrics:
    percentages = summary.daily_value_percentages
    fiber_percentage = percentages.get(
        "fiber", summary.fiber_g / ref.FIBER_DAILY_VALUE_G * 100
    )

    def covered(nutrient_ids: Sequence[str]) -> int:
        return sum(
            1
            for nutrient_id in nutrient_ids
            if percentages.get(nutrient_id, 0) >= ref.COVERAGE_DAILY_VALUE_PCT
        )

    return QualityMetrics(
        category_count=len({entry.category for entry in entries}),
        fiber_percentage=fiber_percentage,
        sodium_percentage=percentages.get("sodium", 0.0),
        vitamin_coverage=covered(list(summary.vitamins)),
        mineral_coverage=covered(list(summary.minerals)),
    )


def assess_quality(
    entries: Sequence[FoodEntry], summary: NutritionSummary
) -> NutritionQuality:
    """Score variety, fiber, sodium and micronutrient density from 50."""
    outcome = apply_rules(quality_metrics(entries, summary), QUALITY_RULES)
    return NutritionQuality(
        score=outcome.score,
        factors=outcome.advice,
        warnings=outcome.warnings,
        recommendations=outcome.recommendations,
    )
