"""Cooking-state multipliers applied to raw nutrition values."""

from dataclasses import dataclass
from types import MappingProxyType


@dataclass(frozen=True)
class CookingAdjustment:
    """Multipliers for a cooking state relative to raw values."""

    calories: float
    protein: float
    carbs: float
    fat: float
    fiber: float
    vitamins: float
    minerals: float


@dataclass(frozen=True)
class WaterSolubleRetention:
    vitamin_c: float
    b_vitamins: float
    folate: float
    choline: float


@dataclass(frozen=True)
class FatSolubleRetention:
    vitamin_a: float
    vitamin_d: float
    vitamin_e: float
    vitamin_k: float


RAW = "raw"

COOKING_ADJUSTMENTS = MappingProxyType(
    {
        "raw": CookingAdjustment(1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0),
        "cooked": CookingAdjustment(1.0, 1.0, 1.0, 1.0, 0.9, 0.85, 0.95),
        "boiled": CookingAdjustment(1.0, 0.95, 1.1, 1.0, 0.8, 0.7, 0.85),
        "steamed": CookingAdjustment(1.0, 0.98, 1.05, 1.0, 0.9, 0.9, 0.95),
        "fried": CookingAdjustment(1.3, 0.95, 1.0, 1.5, 0.85, 0.8, 0.9),
        "baked": CookingAdjustment(1.05, 0.95, 1.0, 1.0, 0.9, 0.85, 0.95),
        "grilled": CookingAdjustment(0.95, 0.9, 1.0, 0.85, 0.9, 0.8, 0.9),
        "roasted": CookingAdjustment(1.0, 0.95, 1.0, 0.9, 0.85, 0.8, 0.9),
        "pan-fried": CookingAdjustment(1.25, 0.95, 1.0, 1.4, 0.85, 0.8, 0.9),
        "dried": CookingAdjustment(3.5, 3.5, 3.5, 3.5, 3.0, 0.6, 3.5),
        "smoked": CookingAdjustment(1.1, 0.95, 1.0, 0.9, 0.9, 0.7, 0.85),
        "fermented": CookingAdjustment(1.0, 1.0, 0.9, 1.0, 0.9, 1.1, 1.0),
        "fresh": CookingAdjustment(1.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0),
        "processed": CookingAdjustment(1.1, 0.9, 1.0, 1.1, 0.8, 0.7, 0.8),
    }
)

# Method-specific vitamin retention; states not listed here retain all.
WATER_SOLUBLE_RETENTION = MappingProxyType(
    {
        "raw": WaterSolubleRetention(1.0, 1.0, 1.0, 1.0),
        "steamed": WaterSolubleRetention(0.85, 0.9, 0.75, 0.95),
        "boiled": WaterSolubleRetention(0.5, 0.6, 0.5, 0.8),
        "roasted": WaterSolubleRetention(0.7, 0.8, 0.65, 0.85),
        "baked": WaterSolubleRetention(0.7, 0.8, 0.65, 0.85),
        "grilled": WaterSolubleRetention(0.65, 0.75, 0.6, 0.8),
        "fried": WaterSolubleRetention(0.6, 0.7, 0.55, 0.75),
    }
)

FAT_SOLUBLE_RETENTION = MappingProxyType(
    {
        "raw": FatSolubleRetention(1.0, 1.0, 1.0, 1.0),
        "steamed": FatSolubleRetention(0.95, 1.0, 0.9, 0.85),
        "boiled": FatSolubleRetention(0.9, 1.0, 0.85, 0.7),
        "roasted": FatSolubleRetention(0.95, 1.0, 0.9, 0.85),
        "baked": FatSolubleRetention(0.95, 1.0, 0.9, 0.85),
        "grilled": FatSolubleRetention(0.9, 1.0, 0.85, 0.8),
        "fried": FatSolubleRetention(1.05, 1.0, 0.95, 0.9),
    }
)

B_VITAMINS = frozenset(
    {
        "thiamine",
        "riboflavin",
        "niacin",
        "pantothenic-acid",
        "vitamin-b6",
        "biotin",
        "vitamin-b12",
    }
)

# Nutrients whose amount does not change with cooking.
COOKING_STABLE = frozenset({"sugar", "sodium"})

COOKING_STATE_DESCRIPTIONS = MappingProxyType(
    {
        "raw": "Raw, uncooked state",
        "cooked": "Generally cooked",
        "boiled": "Boiled in water",
        "steamed": "Steamed with water vapor",
        "fried": "Fried in oil/fat",
        "pan-fried": "Pan-fried with minimal oil",
        "baked": "Baked in oven",
        "grilled": "Grilled over heat",
        "roasted": "Roasted in oven",
        "dried": "Dried or dehydrated",
        "smoked": "Smoked for preservation",
        "fermented": "Fermented or cultured",
        "fresh": "Fresh, ready to eat",
        "processed": "Commercially processed",
    }
)
