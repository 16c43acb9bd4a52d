"""Unit registry and conversion result models."""

from dataclasses import dataclass
from enum import Enum


class UnitCategory(str, Enum):
    """Physical dimension of a unit."""

    WEIGHT = "weight"
    VOLUME = "volume"
    COUNT = "count"
    LENGTH = "length"


class BaseUnit(str, Enum):
    """Canonical measure a quantity is normalized into."""

    GRAMS = "grams"
    MILLILITERS = "milliliters"
    PIECES = "pieces"


@dataclass(frozen=True)
class UnitDescriptor:
    """Static description of a recognized unit string."""

    name: str
    abbreviation: str
    category: UnitCategory
    conversion_factor: float
    common_for: tuple[str, ...] = ()


@dataclass(frozen=True)
class ConversionResult:
    """Base-unit quantity; exactly one of the quantity fields is set."""

    grams: float | None = None
    milliliters: float | None = None
    pieces: float | None = None
    is_valid: bool = True

    def __post_init__(self) -> None:
        populated = [
            value
            for value in (self.grams, self.milliliters, self.pieces)
            if value is not None
        ]
        if len(populated) != 1:
            raise ValueError("ConversionResult needs exactly one quantity field")

    @property
    def base_unit(self) -> BaseUnit:
        """Return which base unit the quantity is expressed in."""
        if self.grams is not None:
            return BaseUnit.GRAMS
        if self.milliliters is not None:
            return BaseUnit.MILLILITERS
        return BaseUnit.PIECES

    @property
    def amount(self) -> float:
        """Return the populated quantity."""
        for value in (self.grams, self.milliliters, self.pieces):
            if value is not None:
                return value
        return 0.0


@dataclass(frozen=True)
class PortionSuggestion:
    """Suggested portion for a food."""

    unit: str
    amount: float
    description: str
