"""Result models for the condition scorers.

Scores are clamped to [0, 100]; metric fields hold the raw computed values.
"""

from dataclasses import dataclass, field
from enum import Enum


class InsulinImpact(str, Enum):
    """Insulin impact derived from glycemic load."""

    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"


class BloodSugarImpact(str, Enum):
    """Blood sugar impact derived from GI and carbohydrate load."""

    MINIMAL = "minimal"
    MODERATE = "moderate"
    SIGNIFICANT = "significant"


class Level(str, Enum):
    """Three-step level used by the general health indicators."""

    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"


class NutritionalSupport(str, Enum):
    """How well intake supports fertility."""

    OPTIMAL = "optimal"
    GOOD = "good"
    NEEDS_IMPROVEMENT = "needs_improvement"


@dataclass(frozen=True)
class PCOSScore:
    """PCOS management score."""

    score: float
    glycemic_load: float
    anti_inflammatory_score: float
    hormone_support_score: float
    insulin_impact: InsulinImpact
    recommendations: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    meal_timing: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class DiabetesScore:
    """Diabetes management score."""

    score: float
    glycemic_index: float
    carb_load: float
    blood_sugar_impact: BloodSugarImpact
    insulin_response: Level
    recommendations: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    portion_advice: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class GeneralHealthScore:
    """General health indicators; ``score`` mirrors metabolic health."""

    score: float
    inflammation_level: Level
    oxidative_stress: Level
    metabolic_health: float
    recommendations: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class FertilityScore:
    """Female or male fertility nutrition score."""

    score: float
    reproductive_health: float
    hormonal_balance: float
    nutritional_support: NutritionalSupport
    fertility_foods: list[str] = field(default_factory=list)
    harmful_foods: list[str] = field(default_factory=list)
    recommendations: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class HealthReport:
    """All condition scores for one list of entries."""

    pcos: PCOSScore
    diabetes: DiabetesScore
    general_health: GeneralHealthScore
    female_fertility: FertilityScore
    male_fertility: FertilityScore
