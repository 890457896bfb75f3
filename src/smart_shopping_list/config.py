from __future__ import annotations
import logging
from pathlib import Path
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from smart_shopping_list.categorizer import OTHER, get_suggested_shopping_order


class Config(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="SHOPPING_LIST_", env_file=".env", extra="ignore")

    lists_dir: Path = Path.home() / ".shopping_lists"
    category_order: list[str] = Field(default_factory=get_suggested_shopping_order)
    category_emoji: dict[str, str] = {
        "Produce": "🥦",
        "Dairy": "🧀",
        "Meat & Seafood": "🥩",
        "Frozen": "🧊",
        "Pantry": "🥫",
        "Beverages": "🧃",
        "Snacks & Sweets": "🍫",
        "Household": "🧻",
        "Other": "🛒",
    }
    log_level: str = "WARNING"

    @field_validator("category_order", mode="after")
    @classmethod
    def ensure_other_last_resort(cls, v: list[str]) -> list[str]:
        if OTHER not in v:
            return [*v, OTHER]
        return v

    @field_validator("log_level", mode="after")
    @classmethod
    def known_log_level(cls, v: str) -> str:
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level '{v}'")
        return level
