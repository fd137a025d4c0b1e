"""Preprocessing steps.

Provides:
- Step: capability protocol every step satisfies
- Step registry: registration and retrieval of step factories
- Built-in steps: center, scale, impute_mean, dummy, rename_columns, cast
"""

# Registry must be imported first (step modules use the register_step decorator)
from datarecipe.steps.registry import (
    StepFactory,
    clear_registry,
    get_step,
    list_step_types,
    register_step,
)
from datarecipe.steps.base import BaseStep, ColumnStep, Step

# Step modules register themselves via @register_step decorator
from datarecipe.steps.cast import CastColumnsStep, create_cast_step
from datarecipe.steps.center import CenterStep, create_center_step
from datarecipe.steps.dummy import DummyStep, create_dummy_step
from datarecipe.steps.impute import ImputeMeanStep, create_impute_mean_step
from datarecipe.steps.rename import RenameColumnsStep, create_rename_step
from datarecipe.steps.scale import ScaleStep, create_scale_step


__all__ = [
    # Protocol and bases
    "Step",
    "BaseStep",
    "ColumnStep",
    # Registry
    "register_step",
    "get_step",
    "list_step_types",
    "clear_registry",
    "StepFactory",
    # Step classes
    "CenterStep",
    "ScaleStep",
    "ImputeMeanStep",
    "DummyStep",
    "RenameColumnsStep",
    "CastColumnsStep",
    # Factory functions
    "create_center_step",
    "create_scale_step",
    "create_impute_mean_step",
    "create_dummy_step",
    "create_rename_step",
    "create_cast_step",
]
