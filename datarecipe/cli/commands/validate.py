"""CLI command for validating recipe files."""

import sys

import click

from datarecipe.core.exceptions import RecipeError, StepError
from datarecipe.models.loader import load_recipe_config


@click.command()
@click.argument("recipe_path", type=click.Path(exists=True))
def validate(recipe_path: str):
    """Validate a recipe YAML file.

    Checks:
    - YAML syntax
    - Recipe schema validation
    - Step types and step configuration

    Examples:

        datarecipe validate recipe.yaml
    """
    try:
        config = load_recipe_config(recipe_path)
        steps = config.build_steps()

        click.echo(f"✓ Recipe '{config.name}' is valid")
        if config.formula is not None:
            click.echo(f"  Formula: {config.formula}")
        else:
            variables = ", ".join(config.vars) if config.vars else "(all columns)"
            click.echo(f"  Variables: {variables}")
        click.echo(f"  Steps: {len(steps)}")
        for index, step_config in enumerate(config.steps, start=1):
            click.echo(f"    {index}. {step_config.type}")

    except (RecipeError, StepError) as e:
        click.echo(f"✗ Recipe validation failed: {e}", err=True)
        sys.exit(1)
