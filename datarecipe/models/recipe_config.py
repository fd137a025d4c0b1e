"""Recipe configuration models for YAML recipe definitions."""

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from datarecipe.steps import get_step
from datarecipe.steps.base import Step

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class StepConfig(BaseModel):
    """
    A single step in the recipe.

    Allows flexible step-specific fields beyond 'type'.
    """

    model_config = ConfigDict(extra="allow")

    type: str = Field(description="Step type (e.g., 'center', 'dummy', 'cast')")

    def step_options(self) -> dict[str, Any]:
        """Return the step configuration, excluding the 'type' field."""
        options = self.model_dump()
        options.pop("type", None)
        return options

    def build(self) -> Step:
        """Create the untrained step from the registry."""
        return get_step(self.type, self.step_options())


class RuntimeConfig(BaseModel):
    """Configuration for training behavior and logging."""

    verbose: bool = Field(default=True, description="Log a notice per trained step")
    fresh: bool = Field(default=False, description="Retrain already trained steps")
    log_level: str = Field(default="INFO", description="Log level for datarecipe")
    json_logs: bool = Field(default=False, description="Emit logs as JSON")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        """Validate log_level is a standard level name."""
        if v.upper() not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        return v.upper()


class RecipeConfig(BaseModel):
    """Complete recipe definition: variables or formula, plus steps."""

    name: str = Field(description="Recipe name (required)")
    formula: Optional[str] = Field(
        default=None, description="Formula such as 'y ~ a + b' deriving roles"
    )
    vars: Optional[List[str]] = Field(
        default=None, description="Columns to use (default: all columns)"
    )
    roles: Optional[List[str]] = Field(
        default=None, description="One role per entry of vars"
    )
    steps: List[StepConfig] = Field(
        default_factory=list, description="Steps to train and apply, in order"
    )
    runtime: RuntimeConfig = Field(
        default_factory=RuntimeConfig, description="Runtime configuration"
    )

    @model_validator(mode="after")
    def validate_variable_source(self) -> "RecipeConfig":
        if self.formula is not None and (self.vars is not None or self.roles is not None):
            raise ValueError("Use either 'formula' or 'vars'/'roles', not both")
        if self.roles is not None and self.vars is None:
            raise ValueError("'roles' requires 'vars'")
        return self

    @classmethod
    def from_dict(cls, data: dict) -> "RecipeConfig":
        """Create RecipeConfig from dictionary."""
        return cls(**data)

    @classmethod
    def from_yaml(cls, path: str) -> "RecipeConfig":
        """Load a recipe configuration from a YAML file."""
        from datarecipe.models.loader import load_recipe_config

        return load_recipe_config(path)

    def build_steps(self) -> list[Step]:
        """Create the configured steps, untrained, in order."""
        return [step.build() for step in self.steps]
