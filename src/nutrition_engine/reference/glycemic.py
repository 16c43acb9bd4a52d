"""Glycemic index reference values."""

from types import MappingProxyType

GLYCEMIC_INDEX = MappingProxyType(
    {
        # Fruits
        "apple": 36,
        "banana": 51,
        "orange": 45,
        "grape": 46,
        "strawberry": 40,
        "blueberry": 53,
        "pineapple": 59,
        "watermelon": 72,
        "mango": 51,
        "peach": 43,
        # Vegetables
        "broccoli": 10,
        "spinach": 15,
        "kale": 15,
        "carrot": 47,
        "sweet potato": 63,
        "potato": 78,
        "corn": 52,
        "peas": 48,
        "beetroot": 61,
        # Grains and starches
        "white rice": 73,
        "brown rice": 68,
        "quinoa": 53,
        "oats": 55,
        "barley": 28,
        "white bread": 75,
        "whole wheat bread": 74,
        "pasta": 49,
        "buckwheat": 45,
        # Legumes
        "lentils": 32,
        "chickpeas": 33,
        "black beans": 30,
        "kidney beans": 24,
        "soybeans": 16,
        # Dairy
        "milk": 39,
        "yogurt": 41,
        "cheese": 15,
        # Nuts and seeds
        "almonds": 15,
        "walnuts": 15,
        "peanuts": 7,
        # Proteins
        "chicken": 0,
        "beef": 0,
        "fish": 0,
        "egg": 0,
        "tofu": 15,
        # Processed foods
        "cookies": 77,
        "crackers": 74,
        "chips": 56,
        "cake": 76,
        "ice cream": 51,
    }
)

CATEGORY_GLYCEMIC_INDEX = MappingProxyType(
    {
        "fruits": 45,
        "vegetables": 20,
        "grains": 65,
        "protein": 0,
        "dairy": 35,
        "nutsSeeds": 15,
        "legumes": 30,
        "snacks": 70,
    }
)

# Neutral value for unknown foods and carb-free food lists.
DEFAULT_GLYCEMIC_INDEX = 50
