"""Core module for datarecipe package."""

from datarecipe.core.batch import ArrowBatch
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
from datarecipe.core.formula import split
from datarecipe.core.inference import TypeClassifier, classify

__all__ = [
    "ArrowBatch",
    "classify",
    "split",
    "TypeClassifier",
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
