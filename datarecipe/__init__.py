"""Data Recipe - declarative preprocessing for tabular data.

A recipe records which columns exist with their types and roles, trains an
ordered list of preprocessing steps on reference data, and applies the
trained steps to new data.
"""

__version__ = "0.1.0"

# Public API
from datarecipe.api import (
    apply,
    describe,
    from_yaml,
    print_recipe,
    recipe,
    recipe_from_formula,
    train,
)

# Core classes
from datarecipe.core.batch import ArrowBatch

# Exceptions
from datarecipe.core.exceptions import (
    DataRecipeError,
    DuplicateVariableError,
    MalformedSpecificationError,
    NoStepsError,
    RecipeError,
    RoleFilterWarning,
    RoleLengthMismatchError,
    StepError,
    UnknownVariableError,
)

# Models
from datarecipe.models.recipe import Recipe
from datarecipe.models.recipe_config import RecipeConfig
from datarecipe.models.variable import Variable, VariableInfo

# Steps
from datarecipe.steps import Step, get_step, list_step_types, register_step

__all__ = [
    # Version
    "__version__",
    # Public API
    "recipe",
    "recipe_from_formula",
    "from_yaml",
    "train",
    "apply",
    "describe",
    "print_recipe",
    # Core classes
    "ArrowBatch",
    "Recipe",
    "RecipeConfig",
    "Variable",
    "VariableInfo",
    "Step",
    "get_step",
    "list_step_types",
    "register_step",
    # Exceptions
    "DataRecipeError",
    "RecipeError",
    "DuplicateVariableError",
    "UnknownVariableError",
    "RoleLengthMismatchError",
    "MalformedSpecificationError",
    "NoStepsError",
    "StepError",
    "RoleFilterWarning",
]
