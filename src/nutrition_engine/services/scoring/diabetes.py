"""Diabetes management scoring."""

from collections.abc import Iterable
from dataclasses import dataclass, field

from nutrition_engine.domain.foods import FoodEntry
from nutrition_engine.domain.scores import BloodSugarImpact, DiabetesScore, Level
from nutrition_engine.services.aggregation import protein_calorie_ratio, total_of
from nutrition_engine.services.glycemic import GlycemicEngine
from nutrition_engine.services.scoring.rules import Rule, always, apply_rules

SODIUM_LIMIT_MG = 2300
SATURATED_FAT_SHARE_LIMIT = 0.4


@dataclass(frozen=True)
class DiabetesMetrics:
    """Inputs to the diabetes rules."""

    glycemic_index: float
    glycemic_load: float
    carb_load: float
    fiber: float
    protein_ratio: float
    saturated_fat: float
    total_fat: float
    sodium: float

    @property
    def saturated_fat_share(self) -> float:
        if self.total_fat == 0:
            return 0.0
        return self.saturated_fat / self.total_fat


DIABETES_RULES: tuple[Rule[DiabetesMetrics], ...] = (
    Rule(
        "glycemic_index_high",
        lambda m: m.glycemic_index > 70,
        -25,
        warnings=("High glycemic index foods may cause blood sugar spikes",),
        recommendations=("Choose lower GI alternatives when possible",),
        advice=("Use smaller portions of high-GI foods",),
    ),
    Rule(
        "glycemic_index_low",
        lambda m: m.glycemic_index < 55,
        15,
        recommendations=("Excellent glycemic index control",),
    ),
    Rule(
        "glycemic_index_medium",
        lambda m: 55 <= m.glycemic_index <= 70,
        -5,
        recommendations=(
            "Consider mixing high-GI foods with protein or healthy fats",
        ),
    ),
    Rule(
        "carb_load_high",
        lambda m: m.carb_load > 60,
        -15,
        warnings=("High carbohydrate load may challenge blood glucose control",),
        recommendations=("Consider carbohydrate counting and portion control",),
        advice=("Limit carbohydrate portions to 45-60g per meal",),
    ),
    Rule(
        "carb_load_low",
        lambda m: m.carb_load < 30,
        10,
        recommendations=("Good carbohydrate portion control",),
    ),
    Rule(
        "fiber_high",
        lambda m: m.fiber > 25,
        10,
        recommendations=("Excellent fiber intake for blood sugar control",),
    ),
    Rule(
        "fiber_low",
        lambda m: m.fiber < 15,
        warnings=("Low fiber may lead to faster glucose absorption",),
        recommendations=("Add more high-fiber foods to slow glucose absorption",),
    ),
    Rule(
        "protein_high",
        lambda m: m.protein_ratio > 20,
        5,
        recommendations=("Good protein intake helps stabilize blood sugar",),
    ),
    Rule(
        "protein_low",
        lambda m: m.protein_ratio < 15,
        recommendations=(
            "Increase protein to help moderate blood glucose response",
        ),
        advice=("Include 20-30g protein at each meal",),
    ),
    Rule(
        "saturated_fat_high",
        lambda m: m.saturated_fat_share > SATURATED_FAT_SHARE_LIMIT,
        warnings=("High saturated fat may worsen insulin resistance",),
        recommendations=(
            "Choose more unsaturated fats like nuts, olive oil, and avocado",
        ),
    ),
    Rule(
        "sodium_high",
        lambda m: m.sodium > SODIUM_LIMIT_MG,
        warnings=("High sodium intake may increase cardiovascular risk",),
        recommendations=("Reduce processed foods and added salt",),
    ),
    Rule(
        "portion_guidance",
        always,
        advice=(
            "Use the plate method: 1/2 vegetables, 1/4 protein, 1/4 starch",
            "Monitor blood glucose 2 hours after meals",
            "Consider eating smaller, more frequent meals",
        ),
    ),
)


def blood_sugar_impact(glycemic_index: float, carb_load: float) -> BloodSugarImpact:
    """Classify ``(GI / 100) * carb load``."""
    impact = glycemic_index / 100 * carb_load
    if impact < 15:
        return BloodSugarImpact.MINIMAL
    if impact < 30:
        return BloodSugarImpact.MODERATE
    return BloodSugarImpact.SIGNIFICANT


def insulin_response(metrics: DiabetesMetrics) -> Level:
    """Estimate insulin response from glycemic load, protein and fiber."""
    response = metrics.glycemic_load
    if metrics.protein_ratio > 20:
        response -= 5
    if metrics.fiber > 20:
        response -= 5
    if response < 10:
        return Level.LOW
    if response < 20:
        return Level.MODERATE
    return Level.HIGH


@dataclass(frozen=True)
class DiabetesScorer:
    """Score a day's entries for blood sugar management."""

    glycemic: GlycemicEngine = field(default_factory=GlycemicEngine)
    rules: tuple[Rule[DiabetesMetrics], ...] = DIABETES_RULES

    def metrics(self, entries: Iterable[FoodEntry]) -> DiabetesMetrics:
        materialized = list(entries)
        return DiabetesMetrics(
            glycemic_index=self.glycemic.weighted_gi(materialized),
            glycemic_load=self.glycemic.glycemic_load(materialized),
            carb_load=total_of(materialized, "carbs"),
            fiber=total_of(materialized, "fiber"),
            protein_ratio=protein_calorie_ratio(materialized),
            saturated_fat=total_of(materialized, "saturated-fat"),
            total_fat=total_of(materialized, "fat"),
            sodium=total_of(materialized, "sodium"),
        )

    def analyze(self, entries: Iterable[FoodEntry]) -> DiabetesScore:
        metrics = self.metrics(entries)
        outcome = apply_rules(metrics, self.rules)
        return DiabetesScore(
            score=outcome.score,
            glycemic_index=metrics.glycemic_index,
            carb_load=metrics.carb_load,
            blood_sugar_impact=blood_sugar_impact(
                metrics.glycemic_index, metrics.carb_load
            ),
            insulin_response=insulin_response(metrics),
            recommendations=outcome.recommendations,
            warnings=outcome.warnings,
            portion_advice=outcome.advice,
        )
