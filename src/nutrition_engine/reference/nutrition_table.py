"""Reference nutrient profiles per 100 g."""

from nutrition_engine.domain.foods import NutrientAmount, NutrientCategory
from nutrition_engine.domain.nutrition import NutritionProfile

_MACRO = NutrientCategory.MACRONUTRIENT
_VITAMIN = NutrientCategory.VITAMIN
_MINERAL = NutrientCategory.MINERAL
_OTHER = NutrientCategory.OTHER

_DISPLAY = {
    "protein": ("Protein", "g", _MACRO, None),
    "carbs": ("Carbohydrates", "g", _MACRO, None),
    "fat": ("Fat", "g", _MACRO, None),
    "saturated-fat": ("Saturated Fat", "g", _MACRO, None),
    "fiber": ("Fiber", "g", _MACRO, None),
    "sugar": ("Sugar", "g", _MACRO, None),
    "cholesterol": ("Cholesterol", "mg", _OTHER, 300),
    "sodium": ("Sodium", "mg", _MINERAL, 2300),
    "vitamin-a": ("Vitamin A", "mcg", _VITAMIN, 900),
    "vitamin-c": ("Vitamin C", "mg", _VITAMIN, 90),
    "vitamin-d": ("Vitamin D", "mcg", _VITAMIN, 20),
    "vitamin-e": ("Vitamin E", "mg", _VITAMIN, 15),
    "vitamin-k": ("Vitamin K", "mcg", _VITAMIN, 120),
    "thiamine": ("Thiamine (B1)", "mg", _VITAMIN, 1.2),
    "riboflavin": ("Riboflavin (B2)", "mg", _VITAMIN, 1.3),
    "niacin": ("Niacin (B3)", "mg", _VITAMIN, 16),
    "vitamin-b6": ("Vitamin B6", "mg", _VITAMIN, 1.7),
    "folate": ("Folate", "mcg", _VITAMIN, 400),
    "vitamin-b12": ("Vitamin B12", "mcg", _VITAMIN, 2.4),
    "pantothenic-acid": ("Pantothenic Acid", "mg", _VITAMIN, 5),
    "calcium": ("Calcium", "mg", _MINERAL, 1000),
    "iron": ("Iron", "mg", _MINERAL, 18),
    "magnesium": ("Magnesium", "mg", _MINERAL, 420),
    "phosphorus": ("Phosphorus", "mg", _MINERAL, 1250),
    "potassium": ("Potassium", "mg", _MINERAL, 4700),
    "zinc": ("Zinc", "mg", _MINERAL, 11),
    "copper": ("Copper", "mg", _MINERAL, 0.9),
    "manganese": ("Manganese", "mg", _MINERAL, 2.3),
    "selenium": ("Selenium", "mcg", _MINERAL, 55),
    "water": ("Water", "g", _OTHER, None),
    "antioxidants": ("Antioxidants", "ORAC", _OTHER, None),
    "omega-3": ("Omega-3 Fatty Acids", "g", _OTHER, None),
    "probiotics": ("Probiotics", "billion CFU", _OTHER, None),
    "leucine": ("Leucine", "g", _OTHER, None),
    "lysine": ("Lysine", "g", _OTHER, None),
    "methionine": ("Methionine", "g", _OTHER, None),
}


def nutrient(
    nutrient_id: str, amount: float, unit: str | None = None
) -> NutrientAmount:
    """Build a nutrient amount with the standard display name and unit."""
    name, default_unit, category, daily_value = _DISPLAY[nutrient_id]
    return NutrientAmount(
        id=nutrient_id,
        name=name,
        amount=amount,
        unit=unit or default_unit,
        category=category,
        daily_value=daily_value,
    )


def _profile(name: str, calories: float, **amounts: float) -> NutritionProfile:
    nutrients = tuple(
        nutrient(key.replace("_", "-"), value) for key, value in amounts.items()
    )
    return NutritionProfile(name=name, calories=calories, nutrients=nutrients)


REFERENCE_FOODS: tuple[NutritionProfile, ...] = (
    _profile(
        "Apple",
        52,
        protein=0.3,
        carbs=14,
        fat=0.2,
        fiber=2.4,
        sugar=10.4,
        sodium=1,
        vitamin_a=3,
        vitamin_c=4.6,
        vitamin_e=0.18,
        vitamin_k=2.2,
        thiamine=0.017,
        riboflavin=0.026,
        niacin=0.091,
        vitamin_b6=0.041,
        folate=3,
        calcium=6,
        iron=0.12,
        magnesium=5,
        phosphorus=11,
        potassium=107,
        zinc=0.04,
        copper=0.027,
        manganese=0.035,
        water=85.56,
        antioxidants=1,
    ),
    _profile(
        "Chicken Breast",
        165,
        protein=31,
        carbs=0,
        fat=3.6,
        saturated_fat=1.0,
        cholesterol=85,
        sodium=74,
        vitamin_a=6,
        vitamin_c=1.2,
        vitamin_d=0.1,
        vitamin_e=0.27,
        vitamin_k=0.4,
        thiamine=0.07,
        riboflavin=0.12,
        niacin=14.8,
        vitamin_b6=1.04,
        folate=4,
        vitamin_b12=0.34,
        pantothenic_acid=1.33,
        calcium=15,
        iron=1.04,
        magnesium=29,
        phosphorus=196,
        potassium=256,
        zinc=1.31,
        copper=0.063,
        manganese=0.02,
        selenium=27.6,
        leucine=2.5,
        lysine=2.9,
        methionine=0.9,
    ),
    _profile(
        "Brown Rice",
        112,
        protein=2.6,
        carbs=23,
        fat=0.9,
        fiber=1.8,
        thiamine=0.19,
        magnesium=43,
        manganese=1.8,
    ),
    _profile(
        "Broccoli",
        34,
        protein=2.8,
        carbs=7,
        fat=0.4,
        fiber=2.6,
        vitamin_c=89.2,
        vitamin_k=101.6,
        folate=63,
        iron=0.73,
    ),
    _profile(
        "Salmon",
        208,
        protein=25.4,
        carbs=0,
        fat=12.4,
        fiber=0,
        vitamin_d=13.2,
        vitamin_b12=4.9,
        omega_3=2.3,
    ),
    _profile(
        "Spinach",
        23,
        protein=2.9,
        carbs=3.6,
        fat=0.4,
        fiber=2.2,
        vitamin_k=483,
        vitamin_a=469,
        folate=194,
        iron=2.71,
    ),
    _profile(
        "Quinoa",
        120,
        protein=4.4,
        carbs=22,
        fat=1.9,
        fiber=2.8,
        manganese=0.6,
        phosphorus=152,
    ),
    _profile(
        "Greek Yogurt",
        100,
        protein=10,
        carbs=3.6,
        fat=5,
        fiber=0,
        calcium=110,
        vitamin_b12=0.75,
        probiotics=1,
    ),
)

GENERIC_PROFILE = NutritionProfile(
    name="Generic food",
    calories=100,
    nutrients=(
        nutrient("protein", 0),
        nutrient("carbs", 0),
        nutrient("fat", 0),
        nutrient("fiber", 0),
    ),
)
