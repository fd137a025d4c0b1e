"""CLI command for describing a recipe."""

import sys

import click

from datarecipe.cli.commands._data import read_csv
from datarecipe.core.exceptions import DataRecipeError
from datarecipe.core.reporting import print_recipe
from datarecipe.models.loader import load_recipe_config
from datarecipe.models.recipe import Recipe


@click.command()
@click.argument("recipe_path", type=click.Path(exists=True))
@click.option(
    "--data",
    "data_path",
    required=True,
    type=click.Path(exists=True),
    help="CSV file used as the recipe template",
)
@click.option(
    "--form-width",
    default=30,
    show_default=True,
    help="Characters of column names shown per step",
)
def describe(recipe_path: str, data_path: str, form_width: int):
    """Show the roles and steps of a recipe built over a CSV file.

    Examples:

        datarecipe describe recipe.yaml --data train.csv
    """
    try:
        config = load_recipe_config(recipe_path)
        recipe = Recipe.from_config(config, read_csv(data_path))
        print_recipe(recipe, form_width=form_width)
    except DataRecipeError as e:
        click.echo(f"Recipe error: {e}", err=True)
        sys.exit(1)
