"""Unit registry and food-specific gram overrides."""

from types import MappingProxyType

from nutrition_engine.domain.units import UnitCategory, UnitDescriptor

_WEIGHT = UnitCategory.WEIGHT
_VOLUME = UnitCategory.VOLUME
_COUNT = UnitCategory.COUNT

UNITS = MappingProxyType(
    {
        "grams": UnitDescriptor(
            "Grams", "g", _WEIGHT, 1, ("vegetables", "fruits", "meat", "grains")
        ),
        "ounces": UnitDescriptor(
            "Ounces", "oz", _WEIGHT, 28.35, ("meat", "cheese", "nuts")
        ),
        "pounds": UnitDescriptor(
            "Pounds", "lb", _WEIGHT, 453.59, ("meat", "large portions")
        ),
        "kilograms": UnitDescriptor("Kilograms", "kg", _WEIGHT, 1000, ("bulk items",)),
        "milliliters": UnitDescriptor(
            "Milliliters", "ml", _VOLUME, 1, ("liquids", "sauces", "oils")
        ),
        "liters": UnitDescriptor("Liters", "L", _VOLUME, 1000, ("beverages", "milk")),
        "cups": UnitDescriptor(
            "Cups", "cup", _VOLUME, 240, ("grains", "vegetables", "fruits", "liquids")
        ),
        "tablespoons": UnitDescriptor(
            "Tablespoons", "tbsp", _VOLUME, 15, ("oils", "sauces", "condiments")
        ),
        "teaspoons": UnitDescriptor(
            "Teaspoons", "tsp", _VOLUME, 5, ("spices", "seasonings")
        ),
        "fluidOunces": UnitDescriptor(
            "Fluid Ounces", "fl oz", _VOLUME, 29.57, ("beverages", "liquids")
        ),
        "pieces": UnitDescriptor(
            "Pieces", "pcs", _COUNT, 1, ("fruits", "eggs", "cookies", "nuts")
        ),
        "slices": UnitDescriptor(
            "Slices", "slice", _COUNT, 1, ("bread", "cheese", "meat", "pizza")
        ),
        "servings": UnitDescriptor(
            "Servings", "serving", _COUNT, 1, ("packaged foods", "recipes")
        ),
    }
)

# Grams per unit for foods recognized by whole-word match in the entry name.
FOOD_OVERRIDES = MappingProxyType(
    {
        "apple": MappingProxyType({"pieces": 182, "slices": 15}),
        "banana": MappingProxyType({"pieces": 118}),
        "bread": MappingProxyType({"slices": 28}),
        "egg": MappingProxyType({"pieces": 50}),
        "rice": MappingProxyType({"cups": 185}),
        "pasta": MappingProxyType({"cups": 220}),
        "milk": MappingProxyType({"cups": 240, "fluidOunces": 30}),
        "cheese": MappingProxyType({"slices": 28, "cups": 113}),
        "chicken": MappingProxyType({"pieces": 85}),
        "broccoli": MappingProxyType({"cups": 91}),
        "spinach": MappingProxyType({"cups": 30}),
    }
)

# Display order for unit suggestions.
UNIT_SUGGESTION_ORDER = (
    "pieces",
    "slices",
    "cups",
    "grams",
    "ounces",
    "tablespoons",
    "teaspoons",
    "milliliters",
)

# Extra units suggested when a name contains one of the trigger words.
UNIT_SUGGESTION_TRIGGERS = (
    (("liquid", "milk", "juice", "water"), ("cups", "milliliters", "fluidOunces")),
    (("fruit", "apple", "banana", "egg"), ("pieces",)),
    (("bread", "cheese", "meat"), ("slices",)),
    (("rice", "pasta", "cereal"), ("cups",)),
    (("oil", "sauce", "dressing"), ("tablespoons", "teaspoons")),
)
