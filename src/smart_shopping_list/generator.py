from __future__ import annotations
import json
import logging
import math
import re
from datetime import date, datetime, timezone
from typing import Any, Iterable, Optional, Union
from smart_shopping_list.consolidator import consolidate_ingredients
from smart_shopping_list.models import MealPlanEntry, Recipe, ShoppingListItem, SourcedIngredient
from smart_shopping_list.parser import parse_ingredient

logger = logging.getLogger(__name__)

_DELIMITER_RE = re.compile(r"[\n,]")
_WRAPPING_CHARS = " \t\r\"'[]"


def _split_delimited(text: str) -> list[str]:
    pieces = (piece.strip(_WRAPPING_CHARS) for piece in _DELIMITER_RE.split(text))
    return [piece for piece in pieces if piece]


def _string_items(items: list[Any]) -> list[str]:
    lines = [item.strip() for item in items if isinstance(item, str)]
    return [line for line in lines if line]


def normalize_ingredient_lines(raw: Union[str, list[Any], None]) -> list[str]:
    """Reduce every stored shape of a recipe's ingredients to a list of lines.

    Recipes arrive with ingredients as a real list, a JSON-encoded array, or
    a newline/comma delimited string. Broken JSON is split on delimiters
    instead, and anything unusable yields an empty list.
    """
    if raw is None:
        return []
    if isinstance(raw, list):
        return _string_items(raw)
    if not isinstance(raw, str):
        logger.warning("Ignoring ingredients of unsupported type %s", type(raw).__name__)
        return []

    text = raw.strip()
    if not text.startswith("["):
        return _split_delimited(text)
    try:
        decoded = json.loads(text)
    except json.JSONDecodeError:
        logger.warning("Malformed ingredient JSON, falling back to delimiter split")
        return _split_delimited(text)
    if isinstance(decoded, list):
        return _string_items(decoded)
    return _split_delimited(text)


def _usable_servings(servings: Optional[float]) -> float:
    if servings and math.isfinite(servings) and servings > 0:
        return servings
    return 1


def serving_multiplier(entry: MealPlanEntry, recipe: Recipe) -> float:
    """Planned over baseline servings; a missing, non-positive or non-finite count counts as 1."""
    return _usable_servings(entry.servings) / _usable_servings(recipe.servings)


def extract_scaled_ingredients(entry: MealPlanEntry, recipe: Recipe) -> list[SourcedIngredient]:
    multiplier = serving_multiplier(entry, recipe)
    scaled: list[SourcedIngredient] = []
    for line in normalize_ingredient_lines(recipe.ingredients):
        parsed = parse_ingredient(line)
        if not parsed.name:
            logger.debug("Dropping ingredient line with no name: %r", line)
            continue
        quantity = parsed.quantity * multiplier
        if not (math.isfinite(quantity) and quantity > 0):
            logger.warning("Scaling %r by %s is out of range, keeping the recipe quantity", line, multiplier)
            quantity = parsed.quantity
        scaled.append(
            SourcedIngredient(
                **{**parsed.model_dump(), "quantity": quantity},
                recipe_id=recipe.id,
                meal_plan_entry_id=entry.id,
            )
        )
    return scaled


def format_quantity(value: float) -> str:
    """Plain string form of a quantity, the way a JavaScript number prints.

    Whole numbers drop the ".0" and nothing is rounded. Exponent notation is
    used only below 1e-6 and from 1e21 up.
    """
    value = float(value)
    if not math.isfinite(value):
        return repr(value)
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    mantissa, _, exponent = repr(value).partition("e")
    if not exponent:
        return mantissa
    power = int(exponent)
    if -7 < power < 21:
        sign = "-" if mantissa.startswith("-") else ""
        digits = mantissa.lstrip("-").replace(".", "")
        return f"{sign}0.{'0' * (-power - 1)}{digits}"
    return f"{mantissa}e{'+' if power > 0 else '-'}{abs(power)}"


def _iso_date(value: Union[date, datetime]) -> str:
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value.date().isoformat()
    return value.isoformat()


def generate_shopping_list(
    meal_plan_entries: Iterable[MealPlanEntry],
    recipes: Iterable[Recipe],
    week_start_date: Union[date, datetime],
    user_id: str,
) -> list[ShoppingListItem]:
    """Build persistence-ready shopping list records for a week's meal plan.

    Entries whose recipe is not among ``recipes`` contribute nothing. Each
    output row keeps only the first recipe and meal plan entry that fed it.
    """
    recipe_map = {recipe.id: recipe for recipe in recipes}
    all_ingredients: list[SourcedIngredient] = []

    for entry in meal_plan_entries:
        recipe = recipe_map.get(entry.recipe_id)
        if recipe is None:
            logger.debug("No recipe %s for meal plan entry %s, skipping", entry.recipe_id, entry.id)
            continue
        ingredients = extract_scaled_ingredients(entry, recipe)
        if not ingredients:
            logger.debug("Recipe %s contributed no ingredients", recipe.id)
        all_ingredients.extend(ingredients)

    week = _iso_date(week_start_date)
    return [
        ShoppingListItem(
            user_id=user_id,
            week_start_date=week,
            item_name=ingredient.name,
            quantity=format_quantity(ingredient.total_quantity),
            unit=ingredient.unit,
            category=ingredient.category,
            is_completed=False,
            recipe_id=ingredient.recipe_ids[0],
            meal_plan_entry_id=ingredient.meal_plan_entry_ids[0],
        )
        for ingredient in consolidate_ingredients(all_ingredients)
    ]
