import pytest
from smart_shopping_list.categorizer import (
    CATEGORY_KEYWORDS, categorize_ingredient, get_suggested_shopping_order
)


@pytest.mark.parametrize("name, category", [
    ("garlic", "Produce"),
    ("Red Onions", "Produce"),
    ("okra", "Produce"),
    ("paneer", "Dairy"),
    ("Greek yogurt", "Dairy"),
    ("eggs", "Dairy"),
    ("lamb chops", "Meat & Seafood"),
    ("keema", "Meat & Seafood"),
    ("frozen paratha", "Frozen"),
    ("peas", "Produce"),
    ("minced meat", "Meat & Seafood"),
    ("smoked ham", "Meat & Seafood"),
    ("shampoo", "Household"),
    ("basmati rice", "Pantry"),
    ("za'atar", "Pantry"),
    ("tea bags", "Beverages"),
    ("dark chocolate", "Snacks & Sweets"),
    ("pistachios", "Snacks & Sweets"),
    ("paper towels", "Household"),
    ("dish soap", "Household"),
    ("xanthan gum", "Other"),
    ("", "Other"),
])
def test_categorize_ingredient(name, category):
    assert categorize_ingredient(name) == category


def test_first_matching_category_wins():
    # "chicken" is checked before "frozen", "orange" before "juice"
    assert categorize_ingredient("frozen chicken") == "Meat & Seafood"
    assert categorize_ingredient("orange juice") == "Produce"
    assert categorize_ingredient("unsalted butter") == "Dairy"
    assert categorize_ingredient("eggplant") == "Produce"
    # "steak" is checked before the "tea" it contains, "chickpeas" is not "peas"
    assert categorize_ingredient("steaks") == "Meat & Seafood"
    assert categorize_ingredient("chickpeas") == "Pantry"
    assert categorize_ingredient("frozen peas") == "Produce"


def test_categorize_is_case_insensitive():
    assert categorize_ingredient("PANEER") == categorize_ingredient("paneer")


def test_categorize_is_deterministic():
    assert all(categorize_ingredient("garam masala") == "Pantry" for _ in range(5))


def test_priority_order_of_table():
    assert [c for c, _ in CATEGORY_KEYWORDS] == [
        "Produce", "Dairy", "Meat & Seafood", "Frozen", "Pantry",
        "Beverages", "Snacks & Sweets", "Household",
    ]


def test_frozen_is_single_keyword():
    assert dict(CATEGORY_KEYWORDS)["Frozen"] == ("frozen",)


def test_suggested_order_ends_with_other():
    order = get_suggested_shopping_order()
    assert order[0] == "Produce"
    assert order[-1] == "Other"
    assert len(order) == len(set(order)) == 9


def test_suggested_order_returns_fresh_list():
    get_suggested_shopping_order().append("Garden")
    assert "Garden" not in get_suggested_shopping_order()
