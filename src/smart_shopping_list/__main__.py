from smart_shopping_list.cli import cli

cli(prog_name="shopping")
