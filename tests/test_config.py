import pytest
from pydantic import ValidationError
from smart_shopping_list.config import Config
from smart_shopping_list.categorizer import get_suggested_shopping_order


def test_config_default_category_order():
    config = Config()
    assert config.category_order == get_suggested_shopping_order()


def test_config_reads_lists_dir_from_env(monkeypatch, tmp_path):
    monkeypatch.setenv("SHOPPING_LIST_LISTS_DIR", str(tmp_path))
    assert Config().lists_dir == tmp_path


def test_config_category_order_from_env_gets_other(monkeypatch):
    monkeypatch.setenv("SHOPPING_LIST_CATEGORY_ORDER", '["Pantry", "Produce"]')
    assert Config().category_order == ["Pantry", "Produce", "Other"]


def test_config_log_level_normalized(monkeypatch):
    monkeypatch.setenv("SHOPPING_LIST_LOG_LEVEL", "debug")
    assert Config().log_level == "DEBUG"


def test_config_invalid_log_level_raises(monkeypatch):
    monkeypatch.setenv("SHOPPING_LIST_LOG_LEVEL", "chatty")
    with pytest.raises(ValidationError, match="Unknown log level"):
        Config()


def test_category_emoji_covers_default_categories():
    config = Config()
    for category in config.category_order:
        assert category in config.category_emoji, f"Missing emoji for category: {category}"
