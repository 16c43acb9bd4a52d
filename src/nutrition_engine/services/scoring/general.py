"""General health indicators: inflammation, oxidative stress, metabolic health."""

from collections.abc import Iterable
from dataclasses import dataclass, field

from nutrition_engine.domain.foods import FoodEntry
from nutrition_engine.domain.scores import GeneralHealthScore, Level
from nutrition_engine.services.aggregation import (
    count_in_category,
    protein_calorie_ratio,
    total_of,
)
from nutrition_engine.services.glycemic import GlycemicEngine
from nutrition_engine.services.scoring.indicators import (
    anti_inflammatory_score,
    inflammation_level,
)
from nutrition_engine.services.scoring.rules import Rule, apply_rules

METABOLIC_HEALTH_THRESHOLD = 60


@dataclass(frozen=True)
class GeneralHealthMetrics:
    """Inputs to the general health indicators."""

    anti_inflammatory: float
    glycemic_index: float
    protein_ratio: float
    fiber: float
    vitamin_c: float
    vitamin_e: float
    antioxidants: float
    produce_count: int
    snack_count: int


METABOLIC_RULES: tuple[Rule[GeneralHealthMetrics], ...] = (
    Rule("low_gi", lambda m: m.glycemic_index < 55, 20),
    Rule("high_gi", lambda m: m.glycemic_index > 70, -20),
    Rule("adequate_protein", lambda m: m.protein_ratio > 15, 10),
    Rule("high_fiber", lambda m: m.fiber > 25, 15),
    Rule(
        "processed_snacks",
        lambda m: m.snack_count > 0,
        -5,
        warnings=("Processed snacks add refined carbs and sodium",),
        per=lambda m: m.snack_count,
    ),
)

ANTIOXIDANT_RULES: tuple[Rule[GeneralHealthMetrics], ...] = (
    Rule("vitamin_c", lambda m: m.vitamin_c > 70, 20),
    Rule("vitamin_e", lambda m: m.vitamin_e > 10, 20),
    Rule("antioxidants", lambda m: m.antioxidants > 5, 20),
    Rule(
        "fruit_and_vegetables",
        lambda m: m.produce_count > 0,
        5,
        per=lambda m: m.produce_count,
    ),
)


def oxidative_stress(metrics: GeneralHealthMetrics) -> Level:
    """Higher antioxidant intake means lower oxidative stress."""
    protection = apply_rules(metrics, ANTIOXIDANT_RULES, base=0).score
    if protection > 60:
        return Level.LOW
    if protection > 30:
        return Level.MODERATE
    return Level.HIGH


@dataclass(frozen=True)
class GeneralHealthScorer:
    """Derive general health indicators for a list of entries."""

    glycemic: GlycemicEngine = field(default_factory=GlycemicEngine)
    metabolic_rules: tuple[Rule[GeneralHealthMetrics], ...] = METABOLIC_RULES

    def metrics(self, entries: Iterable[FoodEntry]) -> GeneralHealthMetrics:
        materialized = list(entries)
        return GeneralHealthMetrics(
            anti_inflammatory=anti_inflammatory_score(materialized),
            glycemic_index=self.glycemic.weighted_gi(materialized),
            protein_ratio=protein_calorie_ratio(materialized),
            fiber=total_of(materialized, "fiber"),
            vitamin_c=total_of(materialized, "vitamin-c"),
            vitamin_e=total_of(materialized, "vitamin-e"),
            antioxidants=total_of(materialized, "antioxidants"),
            produce_count=count_in_category(materialized, "vegetables")
            + count_in_category(materialized, "fruits"),
            snack_count=count_in_category(materialized, "snacks"),
        )

    def metabolic_health(self, entries: Iterable[FoodEntry]) -> float:
        """Metabolic health score 0-100."""
        return apply_rules(self.metrics(entries), self.metabolic_rules).score

    def analyze(self, entries: Iterable[FoodEntry]) -> GeneralHealthScore:
        metrics = self.metrics(entries)
        outcome = apply_rules(metrics, self.metabolic_rules)
        metabolic = outcome.score
        inflammation = inflammation_level(metrics.anti_inflammatory)
        stress = oxidative_stress(metrics)

        warnings = list(outcome.warnings)
        recommendations: list[str] = []
        if inflammation is Level.HIGH:
            warnings.append("Diet may promote chronic inflammation")
            recommendations.append(
                "Add anti-inflammatory foods like fatty fish and colorful vegetables"
            )
            recommendations.append("Reduce processed foods and added sugars")
        if stress is Level.HIGH:
            warnings.append("Low antioxidant intake may raise oxidative stress")
            recommendations.append(
                "Increase antioxidant-rich foods like berries and leafy greens"
            )
            recommendations.append("Consider foods high in vitamins C and E")
        if metabolic < METABOLIC_HEALTH_THRESHOLD:
            warnings.append("Metabolic health score is below the healthy range")
            recommendations.append("Focus on whole foods and balanced macronutrients")
            recommendations.append(
                "Consider intermittent fasting or time-restricted eating"
            )

        return GeneralHealthScore(
            score=metabolic,
            inflammation_level=inflammation,
            oxidative_stress=stress,
            metabolic_health=metabolic,
            recommendations=recommendations,
            warnings=warnings,
        )
