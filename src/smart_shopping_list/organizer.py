from __future__ import annotations
from collections import defaultdict
from typing import Iterable, Optional
from smart_shopping_list.categorizer import OTHER, get_suggested_shopping_order
from smart_shopping_list.models import ShoppingListItem, ShoppingListProgress


def group_shopping_list_by_category(
    items: Iterable[ShoppingListItem],
) -> dict[str, list[ShoppingListItem]]:
    grouped: dict[str, list[ShoppingListItem]] = defaultdict(list)
    for item in items:
        grouped[item.category or OTHER].append(item)
    return dict(grouped)


def order_categories(
    grouped: dict[str, list[ShoppingListItem]], order: Optional[list[str]] = None
) -> list[str]:
    """Non-empty categories in store-walk order; unknown ones follow in insertion order."""
    order = order if order is not None else get_suggested_shopping_order()
    known = [category for category in order if grouped.get(category)]
    extra = [category for category, items in grouped.items() if items and category not in order]
    return known + extra


def calculate_shopping_list_progress(items: Iterable[ShoppingListItem]) -> ShoppingListProgress:
    items = list(items)
    completed = sum(1 for item in items if item.is_completed)
    total = len(items)
    percentage = completed / total * 100 if total else 0.0
    return ShoppingListProgress(completed=completed, total=total, percentage=percentage)


def find_duplicate_items(items: Iterable[ShoppingListItem]) -> list[ShoppingListItem]:
    """Items whose name (ignoring case) already appeared earlier in the list.

    Consolidation never merges across units, so "rice" in cups and "rice" in
    grams both survive; this flags the later ones.
    """
    seen: set[str] = set()
    duplicates: list[ShoppingListItem] = []
    for item in items:
        key = item.item_name.lower()
        if key in seen:
            duplicates.append(item)
        else:
            seen.add(key)
    return duplicates
