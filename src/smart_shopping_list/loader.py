from __future__ import annotations
from pathlib import Path
from pydantic import ValidationError
from smart_shopping_list.models import ShoppingPlan


class PlanLoadError(Exception):
    pass


def load_plan(path: Path) -> ShoppingPlan:
    """Read a meal plan snapshot: userId, weekStartDate, recipes and mealPlanEntries."""
    if not path.exists():
        raise PlanLoadError(f"Plan file '{path}' not found.")
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise PlanLoadError(f"Could not read plan file '{path}': {e}") from e
    try:
        return ShoppingPlan.model_validate_json(text)
    except ValidationError as e:
        if any(err["type"] == "json_invalid" for err in e.errors()):
            raise PlanLoadError(f"{path} is not valid JSON: {e.errors()[0]['msg']}") from e
        raise PlanLoadError(f"{path} does not look like a meal plan snapshot:\n{e}") from e
