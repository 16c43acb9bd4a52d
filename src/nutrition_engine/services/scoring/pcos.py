"""PCOS management scoring."""

from collections.abc import Iterable
from dataclasses import dataclass, field

from nutrition_engine.domain.foods import FoodEntry
from nutrition_engine.domain.scores import InsulinImpact, PCOSScore
from nutrition_engine.services.aggregation import protein_calorie_ratio, total_of
from nutrition_engine.services.glycemic import GlycemicEngine
from nutrition_engine.services.scoring.indicators import (
    anti_inflammatory_score,
    hormone_support_score,
)
from nutrition_engine.services.scoring.rules import Rule, always, apply_rules


@dataclass(frozen=True)
class PCOSMetrics:
    """Inputs to the PCOS rules."""

    glycemic_load: float
    anti_inflammatory: float
    hormone_support: float
    fiber: float
    protein_ratio: float
    vitamin_d: float
    magnesium: float


PCOS_RULES: tuple[Rule[PCOSMetrics], ...] = (
    Rule(
        "glycemic_load_high",
        lambda m: m.glycemic_load > 20,
        -20,
        warnings=("High glycemic load may worsen insulin resistance",),
        recommendations=(
            "Replace high-GI foods with low-GI alternatives",
            "Consider portion control for carbohydrate-rich foods",
        ),
        advice=(
            "Eat high-carb foods earlier in the day when insulin sensitivity is higher",
        ),
    ),
    Rule(
        "glycemic_load_low",
        lambda m: m.glycemic_load < 10,
        15,
        recommendations=("Excellent glycemic control - maintain this pattern",),
    ),
    Rule(
        "anti_inflammatory_high",
        lambda m: m.anti_inflammatory > 70,
        15,
        recommendations=("Great anti-inflammatory food choices",),
    ),
    Rule(
        "anti_inflammatory_low",
        lambda m: m.anti_inflammatory < 30,
        -10,
        warnings=("Diet may promote inflammation",),
        recommendations=(
            "Add more omega-3 rich foods like fatty fish",
            "Include colorful vegetables and berries",
        ),
    ),
    Rule("hormone_support_high", lambda m: m.hormone_support > 70, 10),
    Rule(
        "hormone_support_low",
        lambda m: m.hormone_support < 40,
        -10,
        recommendations=(
            "Include more hormone-supporting nutrients",
            "Add magnesium-rich foods like leafy greens",
            "Consider chromium-rich foods for insulin sensitivity",
        ),
    ),
    Rule(
        "fiber_low",
        lambda m: m.fiber < 25,
        warnings=("Low fiber intake may affect hormone metabolism",),
        recommendations=("Increase fiber intake to support hormone balance",),
        advice=("Include fiber-rich foods at each meal to slow glucose absorption",),
    ),
    Rule("fiber_adequate", lambda m: m.fiber >= 25, 5),
    Rule(
        "protein_low",
        lambda m: m.protein_ratio < 15,
        recommendations=("Increase protein intake to support stable blood sugar",),
        advice=("Include protein at every meal to improve satiety",),
    ),
    Rule(
        "protein_high",
        lambda m: m.protein_ratio > 20,
        5,
        recommendations=("Good protein intake for PCOS management",),
    ),
    Rule(
        "vitamin_d_low",
        lambda m: m.vitamin_d < 10,
        recommendations=("Consider vitamin D-rich foods or supplementation",),
    ),
    Rule(
        "magnesium_low",
        lambda m: m.magnesium < 200,
        recommendations=(
            "Add magnesium-rich foods like nuts, seeds, and leafy greens",
        ),
    ),
    Rule(
        "meal_timing",
        always,
        advice=(
            "Eat regular meals every 3-4 hours to maintain stable blood sugar",
            "Consider a protein-rich breakfast to set metabolic tone for the day",
            "Limit refined carbs in evening meals",
        ),
    ),
)


def insulin_impact(glycemic_load: float) -> InsulinImpact:
    """Map glycemic load onto insulin impact."""
    if glycemic_load < 10:
        return InsulinImpact.LOW
    if glycemic_load < 20:
        return InsulinImpact.MODERATE
    return InsulinImpact.HIGH


@dataclass(frozen=True)
class PCOSScorer:
    """Score a day's entries for PCOS management."""

    glycemic: GlycemicEngine = field(default_factory=GlycemicEngine)
    rules: tuple[Rule[PCOSMetrics], ...] = PCOS_RULES

    def metrics(self, entries: Iterable[FoodEntry]) -> PCOSMetrics:
        materialized = list(entries)
        return PCOSMetrics(
            glycemic_load=self.glycemic.glycemic_load(materialized),
            anti_inflammatory=anti_inflammatory_score(materialized),
            hormone_support=hormone_support_score(materialized),
            fiber=total_of(materialized, "fiber"),
            protein_ratio=protein_calorie_ratio(materialized),
            vitamin_d=total_of(materialized, "vitamin-d"),
            magnesium=total_of(materialized, "magnesium"),
        )

    def analyze(self, entries: Iterable[FoodEntry]) -> PCOSScore:
        metrics = self.metrics(entries)
        outcome = apply_rules(metrics, self.rules)
        return PCOSScore(
            score=outcome.score,
            glycemic_load=metrics.glycemic_load,
            anti_inflammatory_score=metrics.anti_inflammatory,
            hormone_support_score=metrics.hormone_support,
            insulin_impact=insulin_impact(metrics.glycemic_load),
            recommendations=outcome.recommendations,
            warnings=outcome.warnings,
            meal_timing=outcome.advice,
        )
