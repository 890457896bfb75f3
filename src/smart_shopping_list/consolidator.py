from __future__ import annotations
from typing import Iterable
from smart_shopping_list.models import ConsolidatedIngredient, SourcedIngredient


def consolidate_ingredients(items: Iterable[SourcedIngredient]) -> list[ConsolidatedIngredient]:
    """Merge occurrences sharing a case-insensitive (name, unit) key.

    Quantities in different units stay on separate rows. Output follows the
    order in which each key was first seen; the first occurrence supplies the
    row's name, unit and category.
    """
    consolidated: dict[tuple[str, str], ConsolidatedIngredient] = {}
    for item in items:
        key = (item.name.lower(), item.unit.lower())
        existing = consolidated.get(key)
        if existing is None:
            consolidated[key] = ConsolidatedIngredient(
                name=item.name,
                total_quantity=item.quantity,
                unit=item.unit,
                category=item.category,
                recipe_ids=[item.recipe_id],
                meal_plan_entry_ids=[item.meal_plan_entry_id],
            )
            continue
        existing.total_quantity += item.quantity
        existing.recipe_ids.append(item.recipe_id)
        existing.meal_plan_entry_ids.append(item.meal_plan_entry_id)
    return list(consolidated.values())
