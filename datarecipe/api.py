"""Public Python API for datarecipe package.

This module provides the main entry points for building, training and
applying recipes.
"""

from typing import Optional, Sequence

from datarecipe.core import applier, reporting, trainer
from datarecipe.core.batch import ArrowBatch
from datarecipe.models.loader import load_recipe_config
from datarecipe.models.recipe import DataLike, Recipe


def recipe(
    data: DataLike,
    vars: Optional[Sequence[str]] = None,
    roles: Optional[Sequence[str]] = None,
) -> Recipe:
    """Create a recipe from template data.

    Args:
        data: Template data (ArrowBatch, pyarrow Table or dict of columns)
        vars: Columns to use, in order (default: all columns)
        roles: One role per variable, e.g. "predictor" or "outcome"

    Raises:
        DuplicateVariableError: If vars repeats a name
        UnknownVariableError: If a variable is not a column of data
        RoleLengthMismatchError: If roles and vars differ in length

    Example:
        >>> rec = recipe({"a": [1.0, 2.0], "y": [0, 1]}, roles=["predictor", "outcome"])
        >>> rec.var_info.names()
        ['a', 'y']
    """
    return Recipe.from_data(data, vars=vars, roles=roles)


def recipe_from_formula(formula: str, data: DataLike) -> Recipe:
    """Create a recipe whose variables and roles come from a formula.

    Example:
        >>> rec = recipe_from_formula("y ~ a + b", {"a": [1], "b": [2], "y": [3]})
        >>> [v.role for v in rec.var_info.variables]
        ['predictor', 'predictor', 'outcome']
    """
    return Recipe.from_formula(formula, data)


def from_yaml(path: str, data: DataLike) -> Recipe:
    """Build an untrained recipe from a YAML recipe file and template data.

    Raises:
        RecipeError: If the file is missing, invalid, or fails validation
        StepError: If a configured step type is unknown or misconfigured
    """
    config = load_recipe_config(path)
    return Recipe.from_config(config, data)


def train(
    recipe: Recipe,
    training: Optional[DataLike] = None,
    fresh: bool = False,
    verbose: bool = True,
) -> Recipe:
    """Train a recipe's steps in order and return the recipe."""
    return trainer.train(recipe, training=training, fresh=fresh, verbose=verbose)


def apply(
    recipe: Recipe,
    new_data: Optional[DataLike] = None,
    roles: str | Sequence[str] = "all",
) -> ArrowBatch:
    """Apply a trained recipe to new data."""
    return applier.apply(recipe, new_data=new_data, roles=roles)


def describe(recipe: Recipe, form_width: int = 30) -> str:
    """Return a human-readable summary of a recipe."""
    return reporting.describe(recipe, form_width=form_width)


def print_recipe(recipe: Recipe, form_width: int = 30) -> Recipe:
    """Print a recipe summary and return the recipe unchanged."""
    return reporting.print_recipe(recipe, form_width=form_width)
