from __future__ import annotations
import json
import logging
import re
from pathlib import Path
import click
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table
from smart_shopping_list.categorizer import categorize_ingredient
from smart_shopping_list.config import Config
from smart_shopping_list.formatter import format_shopping_list
from smart_shopping_list.generator import format_quantity, generate_shopping_list
from smart_shopping_list.loader import load_plan, PlanLoadError
from smart_shopping_list.models import ShoppingPlan
from smart_shopping_list.organizer import find_duplicate_items
from smart_shopping_list.parser import parse_ingredient

console = Console()
err_console = Console(stderr=True)


def _load_config() -> Config:
    try:
        return Config()
    except ValidationError as e:
        err_console.print(f"[red]Error:[/red] Invalid configuration: {escape(str(e))}")
        raise SystemExit(1)


def _list_filename(plan: ShoppingPlan, suffix: str = ".txt") -> str:
    user = re.sub(r"[^\w-]", "", plan.user_id.replace(" ", "-")).lower() or "user"
    return f"{plan.week_start_date.isoformat()}-{user}{suffix}"


def _save_list(config: Config, plan: ShoppingPlan, output: str, suffix: str) -> None:
    config.lists_dir.mkdir(parents=True, exist_ok=True)
    output_path = config.lists_dir / _list_filename(plan, suffix)
    output_path.write_text(output)
    err_console.print(f"[dim]Saved to {escape(str(output_path))}[/dim]")


@click.group()
@click.option("--verbose", is_flag=True, help="Log every skipped recipe and dropped ingredient line.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool):
    """Smart Shopping List: meal plan to categorized shopping list."""
    config = _load_config()
    logging.basicConfig(
        level=logging.DEBUG if verbose else config.log_level,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
    )
    ctx.obj = config


@cli.command()
@click.argument("lines", nargs=-1, required=True)
def parse(lines: tuple[str, ...]):
    """Parse free-text ingredient lines into quantity, unit, name and category."""
    table = Table(title="Parsed ingredients")
    table.add_column("Name", style="cyan")
    table.add_column("Quantity", justify="right")
    table.add_column("Unit")
    table.add_column("Category")

    for line in lines:
        ingredient = parse_ingredient(line)
        table.add_row(
            escape(ingredient.name) or "—",
            format_quantity(ingredient.quantity),
            ingredient.unit,
            ingredient.category,
        )

    console.print(table)


@cli.command()
@click.argument("names", nargs=-1, required=True)
def categorize(names: tuple[str, ...]):
    """Show the grocery category each ingredient name falls under."""
    for name in names:
        console.print(f"{escape(name)}: [bold]{categorize_ingredient(name)}[/bold]")


@cli.command()
@click.argument("plan_file", type=click.Path(path_type=Path))
@click.option("--json", "as_json", is_flag=True, help="Print records shaped for the data API instead of a checklist.")
@click.option("--save", is_flag=True, help="Also write the output to the lists directory (.json with --json, .txt otherwise).")
@click.option("--emoji/--no-emoji", default=False, show_default=True, help="Prefix category headings with an emoji.")
@click.pass_obj
def generate(config: Config, plan_file: Path, as_json: bool, save: bool, emoji: bool):
    """Build the shopping list for a meal plan snapshot (JSON file)."""
    try:
        plan = load_plan(plan_file)
    except PlanLoadError as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}", soft_wrap=True)
        raise SystemExit(1)

    items = generate_shopping_list(
        plan.meal_plan_entries, plan.recipes, plan.week_start_date, plan.user_id
    )

    if as_json:
        records = [item.model_dump(by_alias=True, exclude_none=True) for item in items]
        output = json.dumps(records, indent=2, ensure_ascii=False)
        click.echo(output)
        if save:
            _save_list(config, plan, output, ".json")
        return

    if not items:
        console.print(
            "[yellow]No ingredients found.[/yellow] "
            "Check that the meal plan entries point at recipes in the file."
        )
        return

    console.print(f"\n[bold]{len(items)}[/bold] items for the week of {plan.week_start_date.isoformat()}.\n")
    output = format_shopping_list(items, config, with_emoji=emoji)
    console.print(output, markup=False, highlight=False)

    duplicates = find_duplicate_items(items)
    if duplicates:
        names = ", ".join(sorted({d.item_name for d in duplicates}))
        console.print(f"\n[dim]Listed in more than one unit: {escape(names)}[/dim]")

    if save:
        _save_list(config, plan, output, ".txt")


@cli.command()
@click.pass_obj
def order(config: Config):
    """Show the category order used to lay out shopping lists."""
    console.print("\n[bold]Shopping order[/bold]\n")
    for i, category in enumerate(config.category_order, start=1):
        label = f"{config.category_emoji.get(category, '')} {category}".strip()
        console.print(f"  {i}. {label}")
    console.print()
