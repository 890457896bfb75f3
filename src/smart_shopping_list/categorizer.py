from __future__ import annotations

OTHER = "Other"

# Checked top to bottom; the first category with a keyword contained in the
# lower-cased name wins, so overlapping keywords resolve by position here. A
# keyword with a leading space only matches at the start of a word.
CATEGORY_KEYWORDS: list[tuple[str, tuple[str, ...]]] = [
    ("Produce", (
        "apple", "banana", "orange", "lemon", "lime", "mango", "pomegranate",
        "watermelon", "melon", "berry", "berries", "tomato", "onion", "shallot",
        "scallion", "garlic", "ginger", "potato", "carrot", "cucumber", "lettuce",
        "spinach", "cabbage", "cauliflower", "broccoli", "eggplant", "aubergine",
        "brinjal", "okra", "bhindi", "zucchini", "courgette", "bell pepper",
        "capsicum", "chili", "chilli", "jalapeno", "green bean",
        "mushroom", "avocado", "cilantro", "coriander leaves", "mint", "parsley",
        "dill", "basil", "celery", "radish", "beetroot", "pumpkin", "squash",
        "leek", "kale", "methi", "curry leaves", "sweet corn", " peas",
    )),
    ("Dairy", (
        "milk", "cheese", "paneer", "halloumi", "feta", "labneh", "yogurt",
        "yoghurt", "dahi", "curd", "laban", "butter", "ghee", "cream", "egg",
    )),
    ("Meat & Seafood", (
        "chicken", "beef", "mutton", "lamb", "goat", "veal", "pork", "bacon",
        "sausage", "turkey", "duck", "keema", "kebab", "fish", "salmon", "tuna",
        "shrimp", "prawn", "crab", "lobster", "squid", "steak", "meat", "mince",
        " ham",
    )),
    ("Frozen", ("frozen",)),
    ("Pantry", (
        "flour", "atta", "maida", "besan", "semolina", "sooji", "sugar", "salt",
        "pepper", "oil", "vinegar", "rice", "basmati", "pasta", "noodle", "bread",
        "pita", "lentil", "dal", "chickpea", "chana", "bean", "bulgur", "freekeh",
        "couscous", "oats", "tahini", "cumin", "turmeric", "coriander", "masala",
        "cardamom", "cinnamon", "clove", "saffron", "paprika", "sumac", "za'atar",
        "zaatar", "nutmeg", "bay leaf", "stock", "broth", "sauce", "honey",
        "baking powder", "baking soda", "yeast", "vanilla", "ketchup", "mustard",
        "mayonnaise", "jam", "pickle", "achar",
    )),
    ("Beverages", (
        "water", "juice", "soda", "tea", "coffee", "lassi", "sharbat", "kombucha",
        "drink",
    )),
    ("Snacks & Sweets", (
        "chocolate", "cocoa", "cookie", "biscuit", "chips", "crisps", "candy",
        "sweets", "cake", "dessert", "popcorn", "cracker", "nuts", "almond",
        "cashew", "pistachio", "walnut", "dates", "baklava", "halwa", "halva",
    )),
    ("Household", (
        "paper towel", "toilet paper", "tissue", "napkin", "cling film",
        "parchment", "trash bag", "garbage bag", "detergent", "soap", "sponge",
        "bleach", "cleaner", "shampoo", "toothpaste",
    )),
]


def categorize_ingredient(name: str) -> str:
    lowered = f" {name.lower()}"
    for category, keywords in CATEGORY_KEYWORDS:
        if any(keyword in lowered for keyword in keywords):
            return category
    return OTHER


def get_suggested_shopping_order() -> list[str]:
    """Category order following a typical store walk, ending with Other."""
    return [category for category, _ in CATEGORY_KEYWORDS] + [OTHER]
