import pytest
from smart_shopping_list.config import Config
from smart_shopping_list.formatter import format_item, format_shopping_list
from smart_shopping_list.models import ShoppingListItem


def _make_item(name: str, quantity: str, unit: str, category: str, completed: bool = False) -> ShoppingListItem:
    return ShoppingListItem(
        user_id="u", week_start_date="2026-10-19", item_name=name, quantity=quantity,
        unit=unit, category=category, is_completed=completed,
    )


@pytest.fixture
def config(monkeypatch, tmp_path):
    monkeypatch.setenv("SHOPPING_LIST_LISTS_DIR", str(tmp_path))
    return Config()


def test_format_groups_by_category(config):
    items = [
        _make_item("garlic", "4", "clove", "Produce"),
        _make_item("rice", "2", "cup", "Pantry"),
        _make_item("spinach", "1", "piece", "Produce"),
    ]
    output = format_shopping_list(items, config)
    produce_pos = output.index("Produce")
    pantry_pos = output.index("Pantry")
    assert produce_pos < output.index("garlic")
    assert produce_pos < output.index("spinach")
    assert pantry_pos < output.index("rice")


def test_format_uses_checkbox_style(config):
    output = format_shopping_list([_make_item("garlic", "4", "clove", "Produce")], config)
    assert "[ ] 4 clove garlic" in output


def test_format_respects_category_order(config):
    items = [
        _make_item("chicken breast", "200", "g", "Meat & Seafood"),
        _make_item("garlic", "4", "clove", "Produce"),
    ]
    output = format_shopping_list(items, config)
    assert output.index("Produce") < output.index("Meat & Seafood")


def test_format_skips_empty_categories(config):
    output = format_shopping_list([_make_item("garlic", "4", "clove", "Produce")], config)
    assert "Dairy" not in output


def test_unknown_category_goes_to_other(config):
    output = format_shopping_list([_make_item("candles", "2", "piece", "Garden")], config)
    assert output.startswith("Other")
    assert "Garden" not in output


def test_format_with_emoji(config):
    output = format_shopping_list([_make_item("garlic", "4", "clove", "Produce")], config, with_emoji=True)
    assert output.startswith("🥦 Produce")


def test_format_item_variants():
    assert format_item(_make_item("eggs", "3", "piece", "Dairy")) == "[ ] 3 eggs"
    assert format_item(_make_item("salt", "1", "to taste", "Pantry")) == "[ ] salt (to taste)"
    assert format_item(_make_item("rice", "2", "cup", "Pantry", completed=True)) == "[x] 2 cup rice"


def test_unknown_category_joins_other_section(config):
    items = [
        _make_item("candles", "2", "piece", "Garden"),
        _make_item("xanthan gum", "1", "piece", "Other"),
        _make_item("garlic", "4", "clove", "Produce"),
    ]
    output = format_shopping_list(items, config)
    assert output.count("Other") == 1
    assert output.index("Produce") < output.index("xanthan gum") < output.index("candles")


def test_format_ends_with_progress(config):
    items = [
        _make_item("garlic", "4", "clove", "Produce", completed=True),
        _make_item("rice", "2", "cup", "Pantry"),
    ]
    output = format_shopping_list(items, config)
    assert output.endswith("1/2 checked (50%)")


def test_format_empty_list(config):
    assert format_shopping_list([], config) == ""
