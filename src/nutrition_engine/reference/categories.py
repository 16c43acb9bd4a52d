"""Keywords used to categorize foods by name."""

from types import MappingProxyType

# Checked in order; the first category with a matching keyword wins.
CATEGORY_COMMON_FOODS = (
    ("fruits", ("apple", "banana", "orange", "berry", "grape", "avocado")),
    (
        "vegetables",
        ("broccoli", "spinach", "carrot", "tomato", "bell pepper", "cauliflower"),
    ),
    ("protein", ("chicken", "salmon", "egg", "tofu", "lentil", "quinoa")),
    ("grains", ("rice", "bread", "pasta", "oats", "potato")),
    ("dairy", ("milk", "cheese", "yogurt", "cottage cheese")),
    ("nutsSeeds", ("almond", "walnut", "chia seed", "flax seed", "peanut butter")),
    ("fatsOils", ("olive oil", "coconut oil", "butter", "avocado oil")),
    ("beverages", ("water", "tea", "coffee", "juice", "smoothie")),
    ("snacks", ("chips", "cookies", "candy", "crackers", "ice cream")),
    ("legumes", ("black bean", "lentil", "chickpea", "kidney bean", "pea")),
    ("herbs", ("garlic", "ginger", "turmeric", "cinnamon", "basil")),
)

CATEGORY_KEYWORDS = (
    (
        "fruits",
        (
            "fruit",
            "berry",
            "pear",
            "peach",
            "plum",
            "mango",
            "pineapple",
            "watermelon",
            "paw paw",
            "coconut",
        ),
    ),
    (
        "vegetables",
        (
            "vegetable",
            "green",
            "leaf",
            "lettuce",
            "cucumber",
            "onion",
            "celery",
            "kale",
            "cabbage",
            "pepper",
            "okra",
            "ugwu",
        ),
    ),
    (
        "protein",
        (
            "meat",
            "beef",
            "pork",
            "fish",
            "tuna",
            "turkey",
            "goat",
            "mutton",
            "catfish",
            "tilapia",
            "mackerel",
        ),
    ),
    (
        "grains",
        (
            "cereal",
            "oat",
            "wheat",
            "yam",
            "cassava",
            "plantain",
            "fufu",
            "garri",
            "semolina",
            "eba",
            "amala",
        ),
    ),
    ("dairy", ("cream", "wara", "nono")),
    ("nutsSeeds", ("nut", "seed", "cashew", "peanut", "groundnut")),
    ("fatsOils", ("oil", "fat")),
    ("beverages", ("drink", "soda", "zobo", "kunu", "fura")),
    ("legumes", ("bean", "cowpea", "black eye")),
    (
        "herbs",
        ("spice", "herb", "seasoning", "salt", "curry", "thyme", "bay leaf"),
    ),
    ("snacks", ("cookie", "cake", "chip", "snack", "sweet", "biscuit", "chin chin")),
)

# Maps storage-layer category labels onto the engine's category ids.
DATABASE_CATEGORY_MAPPING = MappingProxyType(
    {
        "Proteins": "protein",
        "Starches": "grains",
        "Vegetables": "vegetables",
        "Fruits": "fruits",
        "Dairy": "dairy",
        "Nuts and Seeds": "nutsSeeds",
        "Fats and Oils": "fatsOils",
        "Beverages": "beverages",
        "Legumes": "legumes",
        "Herbs and Spices": "herbs",
        "Snacks": "snacks",
    }
)

DEFAULT_CATEGORY = "grains"
