"""Micronutrient groupings and nutrition quality thresholds."""

FAT_SOLUBLE_VITAMINS = ("vitamin-a", "vitamin-d", "vitamin-e", "vitamin-k")
WATER_SOLUBLE_VITAMINS = (
    "vitamin-c",
    "thiamine",
    "riboflavin",
    "niacin",
    "vitamin-b6",
    "folate",
    "vitamin-b12",
    "pantothenic-acid",
    "biotin",
    "choline",
)
MAJOR_MINERALS = (
    "calcium",
    "phosphorus",
    "magnesium",
    "sodium",
    "potassium",
    "chloride",
    "sulfur",
)
TRACE_MINERALS = (
    "iron",
    "zinc",
    "copper",
    "manganese",
    "iodine",
    "selenium",
    "molybdenum",
    "chromium",
    "fluoride",
)

# Calories per gram of each macronutrient.
PROTEIN_KCAL_PER_G = 4
CARB_KCAL_PER_G = 4
FAT_KCAL_PER_G = 9

# Used when entries carry no fiber daily value of their own.
FIBER_DAILY_VALUE_G = 28

VARIETY_CATEGORY_COUNT = 4
# A nutrient counts as covered at this share of its daily value.
COVERAGE_DAILY_VALUE_PCT = 20
RICH_COVERAGE_COUNT = 5
GOOD_COVERAGE_COUNT = 3
