"""Nutrition lookup and scaling for logged portions."""

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from nutrition_engine.domain.foods import FoodEntry, NutrientAmount, NutrientCategory
from nutrition_engine.domain.nutrition import (
    DetailedNutritionSummary,
    MacronutrientRatios,
    MicronutrientGroups,
    NutritionProfile,
    NutritionResult,
    NutritionSummary,
)
from nutrition_engine.domain.units import BaseUnit, ConversionResult
from nutrition_engine.reference import quality as quality_ref
from nutrition_engine.reference.nutrition_table import GENERIC_PROFILE, REFERENCE_FOODS
from nutrition_engine.services.aggregation import total_calories
from nutrition_engine.services.cooking import (
    adjust_for_cooking,
    normalize_cooking_state,
)
from nutrition_engine.services.scoring.quality import assess_quality
from nutrition_engine.services.units import UnitConversionResolver

_REFERENCE_AMOUNT = 100.0

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NutritionCalculator:
    """Compute calories and nutrients for a portion from reference profiles."""

    resolver: UnitConversionResolver = field(default_factory=UnitConversionResolver)
    profiles: tuple[NutritionProfile, ...] = REFERENCE_FOODS
    generic_profile: NutritionProfile = GENERIC_PROFILE
    default_grams_per_piece: float | None = None

    def find_profile(self, food_name: str) -> NutritionProfile | None:
        """Return the first profile whose name contains or is contained in the input."""
        normalized = food_name.strip().lower()
        if not normalized:
            return None
        for profile in self.profiles:
            reference = profile.name.lower()
            if normalized in reference or reference in normalized:
                return profile
        return None

    def compute_nutrition(
        self,
        food_name: str,
        quantity: float,
        unit: str,
        cooking_state: str | None = None,
    ) -> NutritionResult:
        """Scale the matching reference profile to the logged portion.

        Unknown foods resolve to a generic 100 kcal profile instead of failing.
        Unknown units raise ``UnknownUnitError`` for known foods. Quantities
        must be positive. ``cooking_state`` adjusts the raw values for the
        preparation method; unknown states leave them raw.
        """
        if quantity <= 0:
            raise ValueError(f"Quantity must be positive, got {quantity}")

        state = normalize_cooking_state(cooking_state)
        profile = self.find_profile(food_name)
        if profile is None:
            _logger.debug("No reference profile for %r, using generic", food_name)
            return NutritionResult(
                calories=self.generic_profile.calories,
                nutrients=list(self.generic_profile.nutrients),
                grams_equivalent=_REFERENCE_AMOUNT,
                matched_profile=None,
            )

        conversion = self.resolver.convert(quantity, unit, food_name)
        grams = self._grams_equivalent(conversion)
        multiplier = grams / _REFERENCE_AMOUNT
        calories, nutrients = adjust_for_cooking(
            profile.calories * multiplier,
            [nutrient.scaled(multiplier) for nutrient in profile.nutrients],
            state,
        )
        return NutritionResult(
            calories=calories,
            nutrients=nutrients,
            grams_equivalent=grams,
            matched_profile=profile.name,
            cooking_state=state,
        )

    def _grams_equivalent(self, conversion: ConversionResult) -> float:
        if conversion.grams is not None:
            return conversion.grams
        if (
            conversion.base_unit is BaseUnit.PIECES
            and self.default_grams_per_piece is not None
        ):
            return conversion.amount * self.default_grams_per_piece
        return _REFERENCE_AMOUNT

    def summarize(self, entries: Iterable[FoodEntry]) -> NutritionSummary:
        """Total calories, macros, vitamins and minerals across entries."""
        materialized = list(entries)
        totals = _total_nutrients(materialized)
        return NutritionSummary(
            total_calories=total_calories(materialized),
            protein_g=_amount(totals, "protein"),
            carbs_g=_amount(totals, "carbs"),
            fat_g=_amount(totals, "fat"),
            fiber_g=_amount(totals, "fiber"),
            vitamins={
                key: nutrient.amount
                for key, nutrient in totals.items()
                if nutrient.category is NutrientCategory.VITAMIN
            },
            minerals={
                key: nutrient.amount
                for key, nutrient in totals.items()
                if nutrient.category is NutrientCategory.MINERAL
            },
            daily_value_percentages={
                key: nutrient.amount / nutrient.daily_value * 100
                for key, nutrient in totals.items()
                if nutrient.daily_value
            },
        )

    def detailed_summary(
        self, entries: Iterable[FoodEntry]
    ) -> DetailedNutritionSummary:
        """Summary with macronutrient ratios, grouped micronutrients and quality."""
        materialized = list(entries)
        summary = self.summarize(materialized)
        totals = _total_nutrients(materialized)
        return DetailedNutritionSummary(
            summary=summary,
            macronutrient_ratios=macronutrient_ratios(summary),
            micronutrients=MicronutrientGroups(
                fat_soluble_vitamins=_group(totals, quality_ref.FAT_SOLUBLE_VITAMINS),
                water_soluble_vitamins=_group(
                    totals, quality_ref.WATER_SOLUBLE_VITAMINS
                ),
                major_minerals=_group(totals, quality_ref.MAJOR_MINERALS),
                trace_minerals=_group(totals, quality_ref.TRACE_MINERALS),
            ),
            quality=assess_quality(materialized, summary),
        )


def macronutrient_ratios(summary: NutritionSummary) -> MacronutrientRatios:
    """Share of protein, carb and fat calories; all zero without macros."""
    protein = summary.protein_g * quality_ref.PROTEIN_KCAL_PER_G
    carbs = summary.carbs_g * quality_ref.CARB_KCAL_PER_G
    fat = summary.fat_g * quality_ref.FAT_KCAL_PER_G
    total = protein + carbs + fat
    if total <= 0:
        return MacronutrientRatios()
    return MacronutrientRatios(
        protein_percentage=protein / total * 100,
        carb_percentage=carbs / total * 100,
        fat_percentage=fat / total * 100,
    )


def _total_nutrients(entries: Iterable[FoodEntry]) -> dict[str, NutrientAmount]:
    # The first occurrence of an id supplies its name, unit and daily value.
    totals: dict[str, NutrientAmount] = {}
    for entry in entries:
        for nutrient in entry.nutrients:
            current = totals.get(nutrient.id)
            if current is None:
                totals[nutrient.id] = nutrient
                continue
            totals[nutrient.id] = NutrientAmount.model_validate(
                {
                    **current.model_dump(),
                    "amount": current.amount + nutrient.amount,
                    "daily_value": current.daily_value or nutrient.daily_value,
                }
            )
    return totals


def _amount(totals: dict[str, NutrientAmount], nutrient_id: str) -> float:
    nutrient = totals.get(nutrient_id)
    return nutrient.amount if nutrient is not None else 0.0


def _group(
    totals: dict[str, NutrientAmount], nutrient_ids: Sequence[str]
) -> list[NutrientAmount]:
    return [totals[key] for key in nutrient_ids if key in totals]
