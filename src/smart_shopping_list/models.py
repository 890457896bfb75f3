from __future__ import annotations
from datetime import date
from typing import Any, Optional, Union
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _ApiRecord(BaseModel):
    """Shape shared with the external data API: camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ParsedIngredient(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    quantity: float = Field(gt=0)
    unit: str
    category: str


class SourcedIngredient(ParsedIngredient):
    recipe_id: str
    meal_plan_entry_id: str


class ConsolidatedIngredient(BaseModel):
    name: str
    total_quantity: float
    unit: str
    category: str
    recipe_ids: list[str] = Field(default_factory=list)
    meal_plan_entry_ids: list[str] = Field(default_factory=list)


class Recipe(_ApiRecord):
    id: str
    name: Optional[str] = None
    ingredients: Union[str, list[Any], None] = None
    servings: Optional[float] = None


class MealPlanEntry(_ApiRecord):
    id: str
    recipe_id: str
    servings: Optional[float] = None
    date: Optional[str] = None
    meal_type: Optional[str] = None


class ShoppingListItem(_ApiRecord):
    user_id: str
    week_start_date: str
    item_name: str
    quantity: str
    unit: str
    category: str
    is_completed: bool = False
    recipe_id: Optional[str] = None
    meal_plan_entry_id: Optional[str] = None


class ShoppingPlan(_ApiRecord):
    user_id: str
    week_start_date: date
    recipes: list[Recipe] = Field(default_factory=list)
    meal_plan_entries: list[MealPlanEntry] = Field(default_factory=list)


class ShoppingListProgress(BaseModel):
    completed: int
    total: int
    percentage: float
