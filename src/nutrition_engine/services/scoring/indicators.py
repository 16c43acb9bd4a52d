"""Shared indicators used by several condition scorers."""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from nutrition_engine.domain.foods import FoodEntry
from nutrition_engine.domain.scores import Level
from nutrition_engine.reference.inflammation import (
    ANTI_INFLAMMATORY_FOODS,
    CATEGORY_INFLAMMATION_BONUS,
    PRO_INFLAMMATORY_FOODS,
)
from nutrition_engine.services.aggregation import protein_calorie_ratio, total_of
from nutrition_engine.services.scoring.rules import Rule, apply_rules, clamp


def anti_inflammatory_score(
    entries: Iterable[FoodEntry],
    anti: Mapping[str, float] = ANTI_INFLAMMATORY_FOODS,
    pro: Mapping[str, float] = PRO_INFLAMMATORY_FOODS,
    category_bonus: Mapping[str, float] = CATEGORY_INFLAMMATION_BONUS,
) -> float:
    """Score 0-100 starting at 50, moved by keyword and category weights."""
    score = 50.0
    for entry in entries:
        name = entry.normalized_name
        score += sum(weight for keyword, weight in anti.items() if keyword in name)
        score += sum(weight for keyword, weight in pro.items() if keyword in name)
        score += category_bonus.get(entry.category, 0)
    return clamp(score)


@dataclass(frozen=True)
class HormoneMetrics:
    fiber: float
    protein_ratio: float
    magnesium: float
    vitamin_d: float
    omega3: float


HORMONE_SUPPORT_RULES: tuple[Rule[HormoneMetrics], ...] = (
    Rule("fiber_high", lambda m: m.fiber > 25, 15),
    Rule("fiber_low", lambda m: m.fiber < 15, -10),
    Rule("protein_high", lambda m: m.protein_ratio > 20, 10),
    Rule("protein_low", lambda m: m.protein_ratio < 15, -10),
    Rule("magnesium", lambda m: m.magnesium > 200, 5),
    Rule("vitamin_d", lambda m: m.vitamin_d > 10, 5),
    Rule("omega3", lambda m: m.omega3 > 1, 5),
)


def hormone_support_score(entries: Iterable[FoodEntry]) -> float:
    """Score 0-100 for nutrients that support hormone metabolism."""
    materialized = list(entries)
    metrics = HormoneMetrics(
        fiber=total_of(materialized, "fiber"),
        protein_ratio=protein_calorie_ratio(materialized),
        magnesium=total_of(materialized, "magnesium"),
        vitamin_d=total_of(materialized, "vitamin-d"),
        omega3=total_of(materialized, "omega-3"),
    )
    return apply_rules(metrics, HORMONE_SUPPORT_RULES).score


def inflammation_level(anti_inflammatory: float) -> Level:
    """Map the anti-inflammatory score onto an inflammation level."""
    if anti_inflammatory > 70:
        return Level.LOW
    if anti_inflammatory > 40:
        return Level.MODERATE
    return Level.HIGH
