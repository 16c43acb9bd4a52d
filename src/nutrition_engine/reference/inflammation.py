"""Keyword weights for the anti-inflammatory score."""

from types import MappingProxyType

ANTI_INFLAMMATORY_FOODS = MappingProxyType(
    {
        "spinach": 10,
        "kale": 10,
        "broccoli": 8,
        "blueberry": 9,
        "strawberry": 8,
        "salmon": 10,
        "mackerel": 10,
        "walnuts": 8,
        "almonds": 6,
        "olive oil": 9,
        "avocado": 7,
        "tomato": 6,
        "bell pepper": 6,
        "ginger": 9,
        "turmeric": 10,
        "green tea": 8,
    }
)

PRO_INFLAMMATORY_FOODS = MappingProxyType(
    {
        "sugar": -8,
        "white bread": -6,
        "processed meat": -7,
        "fried food": -8,
        "soda": -7,
        "cookies": -6,
        "cake": -6,
        "chips": -5,
        "candy": -7,
    }
)

CATEGORY_INFLAMMATION_BONUS = MappingProxyType(
    {
        "vegetables": 5,
        "fruits": 3,
        "nutsSeeds": 4,
        "snacks": -5,
    }
)
