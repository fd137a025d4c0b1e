"""CLI command for training a recipe and applying it to data."""

import sys

import click

from datarecipe.cli.commands._data import read_csv, write_csv
from datarecipe.core.exceptions import DataRecipeError, RecipeError
from datarecipe.core.logging import configure_logging
from datarecipe.models.loader import load_recipe_config
from datarecipe.models.recipe import Recipe


@click.command()
@click.argument("recipe_path", type=click.Path(exists=True))
@click.option(
    "--data",
    "data_path",
    required=True,
    type=click.Path(exists=True),
    help="CSV file to train the recipe on",
)
@click.option(
    "--new-data",
    "new_data_path",
    type=click.Path(exists=True),
    help="CSV file to apply the trained recipe to (default: the training data)",
)
@click.option(
    "--roles",
    multiple=True,
    help="Only output columns with this role (can be used multiple times)",
)
@click.option(
    "--output",
    type=click.Path(dir_okay=False, writable=True),
    help="Output CSV file (default: stdout)",
)
@click.option(
    "--log-level",
    default=None,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]),
    help="Log level (default: from the recipe runtime section)",
)
@click.option(
    "--json-logs",
    is_flag=True,
    help="Use JSON format for logs",
)
def bake(
    recipe_path: str,
    data_path: str,
    new_data_path: str | None,
    roles: tuple,
    output: str | None,
    log_level: str | None,
    json_logs: bool,
):
    """Train a recipe on a CSV file and write the processed data.

    Examples:

        datarecipe bake recipe.yaml --data train.csv --output baked.csv
        datarecipe bake recipe.yaml --data train.csv --new-data test.csv
        datarecipe bake recipe.yaml --data train.csv --roles predictor
    """
    try:
        config = load_recipe_config(recipe_path)
    except RecipeError as e:
        click.echo(f"Recipe error: {e}", err=True)
        sys.exit(1)

    runtime = config.runtime
    configure_logging(
        level=log_level or runtime.log_level,
        json_format=json_logs or runtime.json_logs,
        recipe_name=config.name,
        stream=sys.stderr if output is None else None,
    )

    try:
        training = read_csv(data_path)
        recipe = Recipe.from_config(config, training)
        recipe.train(training, fresh=runtime.fresh, verbose=runtime.verbose)

        new_data = read_csv(new_data_path) if new_data_path else training
        baked = recipe.apply(new_data, roles=list(roles) if roles else "all")

        text = write_csv(baked, output)
        if text is not None:
            click.echo(text, nl=False)
        else:
            click.echo(
                f"Wrote {baked.row_count} rows and {len(baked.columns)} columns to {output}",
                err=True,
            )
    except DataRecipeError as e:
        click.echo(f"Recipe error: {e}", err=True)
        sys.exit(1)
