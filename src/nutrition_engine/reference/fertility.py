"""Fertility food keywords and micronutrient targets."""

from types import MappingProxyType

FEMALE_FERTILITY_FOODS = (
    "spinach",
    "kale",
    "lentils",
    "beans",
    "salmon",
    "sardines",
    "eggs",
    "greek yogurt",
    "avocado",
    "walnuts",
    "berries",
    "quinoa",
    "sweet potato",
    "olive oil",
)

MALE_FERTILITY_FOODS = (
    "oysters",
    "pumpkin seeds",
    "brazil nuts",
    "walnuts",
    "tomato",
    "salmon",
    "sardines",
    "eggs",
    "spinach",
    "citrus",
    "orange",
    "dark chocolate",
    "pomegranate",
    "garlic",
)

_FEMALE_ALCOHOL_WARNING = (
    "Alcohol may reduce fertility; consider avoiding it while trying to conceive"
)
_MALE_ALCOHOL_WARNING = "Alcohol can lower testosterone and sperm quality"

# Keyword -> warning appended when the keyword appears in an entry name.
FEMALE_HARMFUL_FOODS = MappingProxyType(
    {
        "alcohol": _FEMALE_ALCOHOL_WARNING,
        "wine": _FEMALE_ALCOHOL_WARNING,
        "beer": _FEMALE_ALCOHOL_WARNING,
        "soda": "Sugary drinks are linked to ovulatory infertility",
        "trans fat": "Trans fats are associated with ovulatory infertility",
        "fried": "Fried foods often contain trans fats that may affect ovulation",
        "processed meat": "Processed meats may negatively affect reproductive health",
        "swordfish": "High-mercury fish should be avoided when trying to conceive",
        "energy drink": "High caffeine intake may affect fertility",
    }
)

MALE_HARMFUL_FOODS = MappingProxyType(
    {
        "alcohol": _MALE_ALCOHOL_WARNING,
        "beer": _MALE_ALCOHOL_WARNING,
        "wine": _MALE_ALCOHOL_WARNING,
        "soda": "Sugary drinks are associated with lower sperm motility",
        "trans fat": "Trans fats are associated with lower sperm counts",
        "fried": "Fried foods often contain trans fats linked to poorer sperm quality",
        "processed meat": "Processed meats are associated with lower sperm quality",
        "soy": "Large amounts of soy products may affect sperm concentration",
        "energy drink": "High caffeine intake may affect sperm health",
    }
)

# Points per distinct fertility food / harmful food present.
FERTILITY_FOOD_BONUS = 3
HARMFUL_FOOD_PENALTY = -5

# Daily targets (same units as the reference nutrient table).
FOLATE_TARGET_MCG = 400
IRON_TARGET_MG = 18
VITAMIN_D_TARGET_MCG = 15
OMEGA3_TARGET_G = 1.0
ZINC_TARGET_MG = 11
SELENIUM_TARGET_MCG = 55
VITAMIN_C_TARGET_MG = 90
VITAMIN_E_TARGET_MG = 15
ANTIOXIDANT_TARGET = 5

# Intakes below these trigger the deficiency rules.
IRON_LOW_MG = 10
VITAMIN_D_LOW_MCG = 5
ZINC_LOW_MG = 8
SELENIUM_LOW_MCG = 30

GLYCEMIC_LOAD_LOW = 10
GLYCEMIC_LOAD_HIGH = 20
FIBER_HIGH_G = 25
# Percent of calories from protein.
PROTEIN_RATIO_TARGET = 15
