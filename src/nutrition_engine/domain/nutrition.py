"""Nutrition domain models."""

from dataclasses import dataclass, field

from nutrition_engine.domain.foods import NutrientAmount


@dataclass(frozen=True)
class NutritionProfile:
    """Reference nutrient profile per 100 g of a food."""

    name: str
    calories: float
    nutrients: tuple[NutrientAmount, ...]


@dataclass(frozen=True)
class NutritionResult:
    """Calories and nutrients computed for one logged portion."""

    calories: float
    nutrients: list[NutrientAmount]
    grams_equivalent: float
    matched_profile: str | None = None
    cooking_state: str = "raw"


@dataclass(frozen=True)
class NutritionSummary:
    """Totals across a list of food entries."""

    total_calories: float
    protein_g: float
    carbs_g: float
    fat_g: float
    fiber_g: float
    vitamins: dict[str, float] = field(default_factory=dict)
    minerals: dict[str, float] = field(default_factory=dict)
    daily_value_percentages: dict[str, float] = field(default_factory=dict)


@dataclass(frozen=True)
class MacronutrientRatios:
    """Share of macronutrient calories, in percent."""

    protein_percentage: float = 0.0
    carb_percentage: float = 0.0
    fat_percentage: float = 0.0


@dataclass(frozen=True)
class MicronutrientGroups:
    """Summed micronutrients grouped by solubility and mineral class."""

    fat_soluble_vitamins: list[NutrientAmount] = field(default_factory=list)
    water_soluble_vitamins: list[NutrientAmount] = field(default_factory=list)
    major_minerals: list[NutrientAmount] = field(default_factory=list)
    trace_minerals: list[NutrientAmount] = field(default_factory=list)


@dataclass(frozen=True)
class NutritionQuality:
    score: float
    factors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    recommendations: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class DetailedNutritionSummary:
    """Summary plus macronutrient ratios, micronutrient groups and quality."""

    summary: NutritionSummary
    macronutrient_ratios: MacronutrientRatios
    micronutrients: MicronutrientGroups
    quality: NutritionQuality
