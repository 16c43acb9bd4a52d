"""Unit conversion into base quantities (grams, milliliters, pieces)."""

import logging
import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from nutrition_engine.domain.units import (
    ConversionResult,
    PortionSuggestion,
    UnitCategory,
    UnitDescriptor,
)
from nutrition_engine.reference.units import (
    FOOD_OVERRIDES,
    UNIT_SUGGESTION_ORDER,
    UNIT_SUGGESTION_TRIGGERS,
    UNITS,
)

_logger = logging.getLogger(__name__)

_PORTION_SUGGESTIONS = {
    "apple": (
        PortionSuggestion("pieces", 1, "Medium apple"),
        PortionSuggestion("slices", 8, "Sliced apple"),
        PortionSuggestion("grams", 182, "Medium apple"),
    ),
    "banana": (
        PortionSuggestion("pieces", 1, "Medium banana"),
        PortionSuggestion("grams", 118, "Medium banana"),
    ),
    "bread": (
        PortionSuggestion("slices", 1, "Single slice"),
        PortionSuggestion("slices", 2, "Sandwich serving"),
        PortionSuggestion("grams", 28, "Single slice"),
    ),
    "rice": (
        PortionSuggestion("cups", 0.5, "Side portion"),
        PortionSuggestion("cups", 1, "Main portion"),
        PortionSuggestion("grams", 185, "1 cup cooked"),
    ),
    "chicken": (
        PortionSuggestion("ounces", 3, "Small serving"),
        PortionSuggestion("ounces", 6, "Large serving"),
        PortionSuggestion("grams", 85, "Standard serving"),
    ),
}
_DEFAULT_PORTIONS = (
    PortionSuggestion("grams", 100, "Standard portion"),
    PortionSuggestion("ounces", 3.5, "Standard portion"),
)


class UnknownUnitError(ValueError):
    """Raised when a unit string is not in the unit registry."""

    def __init__(self, unit: str) -> None:
        super().__init__(f"Unknown unit: {unit}")
        self.unit = unit


def contains_word(text: str, word: str) -> bool:
    """Return True when ``word`` appears in ``text`` on word boundaries."""
    pattern = r"\b" + re.escape(word.lower()) + r"\b"
    return re.search(pattern, text.lower()) is not None


def matching_keywords(text: str, keywords: Iterable[str]) -> list[str]:
    """Return keywords found as whole words in text, longest first."""
    ordered = sorted(keywords, key=len, reverse=True)
    return [keyword for keyword in ordered if contains_word(text, keyword)]


@dataclass(frozen=True)
class UnitConversionResolver:
    """Resolve quantities into base units using food overrides first."""

    units: Mapping[str, UnitDescriptor] = field(default_factory=lambda: UNITS)
    overrides: Mapping[str, Mapping[str, float]] = field(
        default_factory=lambda: FOOD_OVERRIDES
    )

    def convert(
        self, amount: float, unit: str, food_name: str | None = None
    ) -> ConversionResult:
        """Convert an amount of ``unit`` into its base unit.

        A food-specific override always yields grams. Without one, weight units
        convert to grams, volume units to milliliters and count units to pieces.
        """
        descriptor = self.units.get(unit)
        if descriptor is None:
            raise UnknownUnitError(unit)

        if food_name:
            grams_per_unit = self.override_for(food_name, unit)
            if grams_per_unit is not None:
                return ConversionResult(grams=amount * grams_per_unit)

        scaled = amount * descriptor.conversion_factor
        if descriptor.category is UnitCategory.WEIGHT:
            return ConversionResult(grams=scaled)
        if descriptor.category is UnitCategory.VOLUME:
            return ConversionResult(milliliters=scaled)
        if descriptor.category is UnitCategory.COUNT:
            return ConversionResult(pieces=scaled)
        return ConversionResult(grams=amount)

    def safe_convert(
        self, amount: float, unit: str, food_name: str | None = None
    ) -> ConversionResult:
        """Convert without raising; unknown units are assumed to be grams."""
        try:
            return self.convert(amount, unit, food_name)
        except UnknownUnitError as exc:
            _logger.warning("Unit conversion failed, assuming grams: %s", exc)
            return ConversionResult(grams=amount, is_valid=False)

    def override_for(self, food_name: str, unit: str) -> float | None:
        """Return grams per unit from the first matching override, if any."""
        for keyword in matching_keywords(food_name, list(self.overrides)):
            grams_per_unit = self.overrides[keyword].get(unit)
            if grams_per_unit is not None:
                return float(grams_per_unit)
        return None

    def is_known_unit(self, unit: str) -> bool:
        """Return True when the unit is in the registry."""
        return unit in self.units

    def units_for_food(self, food_name: str) -> list[str]:
        """Return units that make sense for a food, most relevant first."""
        recommended: list[str] = []
        matches = matching_keywords(food_name, list(self.overrides))
        if matches:
            recommended.extend(self.overrides[matches[0]])

        recommended.extend(["grams", "ounces"])
        for triggers, extra_units in UNIT_SUGGESTION_TRIGGERS:
            if any(contains_word(food_name, trigger) for trigger in triggers):
                recommended.extend(extra_units)

        unique = list(dict.fromkeys(recommended))
        return sorted(unique, key=_suggestion_rank)

    def portion_suggestions(self, food_name: str) -> list[PortionSuggestion]:
        """Return typical portions for a food."""
        for keyword, suggestions in _PORTION_SUGGESTIONS.items():
            if contains_word(food_name, keyword):
                return list(suggestions)
        return list(_DEFAULT_PORTIONS)


def _suggestion_rank(unit: str) -> int:
    if unit in UNIT_SUGGESTION_ORDER:
        return UNIT_SUGGESTION_ORDER.index(unit)
    return len(UNIT_SUGGESTION_ORDER)


_DEFAULT_RESOLVER = UnitConversionResolver()


def convert_to_base_unit(
    amount: float, unit: str, food_name: str | None = None
) -> ConversionResult:
    """Convert using the default unit registry; raises ``UnknownUnitError``."""
    return _DEFAULT_RESOLVER.convert(amount, unit, food_name)


def safe_convert_to_base_unit(
    amount: float, unit: str, food_name: str | None = None
) -> ConversionResult:
    """Convert using the default registry, never raising."""
    return _DEFAULT_RESOLVER.safe_convert(amount, unit, food_name)


def validate_unit(unit: str) -> bool:
    """Return True when the unit is supported."""
    return _DEFAULT_RESOLVER.is_known_unit(unit)
