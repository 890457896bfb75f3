from smart_shopping_list.categorizer import categorize_ingredient, get_suggested_shopping_order
from smart_shopping_list.consolidator import consolidate_ingredients
from smart_shopping_list.generator import generate_shopping_list
from smart_shopping_list.parser import parse_ingredient

__all__ = [
    "categorize_ingredient",
    "consolidate_ingredients",
    "generate_shopping_list",
    "get_suggested_shopping_order",
    "parse_ingredient",
]
