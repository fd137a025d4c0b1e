"""Models module for recipes, column metadata and recipe configuration."""

from datarecipe.models.loader import load_recipe_config
from datarecipe.models.recipe import Recipe, narrow
from datarecipe.models.recipe_config import RecipeConfig, RuntimeConfig, StepConfig
from datarecipe.models.variable import DERIVED, ORIGINAL, Variable, VariableInfo

__all__ = [
    "Recipe",
    "RecipeConfig",
    "RuntimeConfig",
    "StepConfig",
    "Variable",
    "VariableInfo",
    "ORIGINAL",
    "DERIVED",
    "narrow",
    "load_recipe_config",
]
