from __future__ import annotations
from smart_shopping_list.categorizer import OTHER
from smart_shopping_list.config import Config
from smart_shopping_list.models import ShoppingListItem
from smart_shopping_list.organizer import (
    calculate_shopping_list_progress, group_shopping_list_by_category, order_categories,
)
from smart_shopping_list.parser import DEFAULT_UNIT, TO_TASTE


def format_item(item: ShoppingListItem) -> str:
    box = "[x]" if item.is_completed else "[ ]"
    if item.unit == TO_TASTE:
        return f"{box} {item.item_name} ({TO_TASTE})"
    if item.unit == DEFAULT_UNIT:
        return f"{box} {item.quantity} {item.item_name}"
    return f"{box} {item.quantity} {item.unit} {item.item_name}"


def format_shopping_list(
    items: list[ShoppingListItem], config: Config, with_emoji: bool = False
) -> str:
    grouped = group_shopping_list_by_category(items)
    # Categories missing from the configured order are listed under Other.
    sections: dict[str, list[ShoppingListItem]] = {}
    for category in order_categories(grouped, config.category_order):
        heading = category if category in config.category_order else OTHER
        sections.setdefault(heading, []).extend(grouped[category])

    lines: list[str] = []
    for category, section in sections.items():
        heading = category
        if with_emoji and category in config.category_emoji:
            heading = f"{config.category_emoji[category]} {category}"
        lines.append(f"\n{heading}")
        lines.append("-" * len(heading))
        for item in section:
            lines.append(format_item(item))

    if items:
        progress = calculate_shopping_list_progress(items)
        lines.append(f"\n{progress.completed}/{progress.total} checked ({progress.percentage:.0f}%)")

    return "\n".join(lines).strip()
