"""Exception hierarchy for the datarecipe package."""


class DataRecipeError(Exception):
    """Base exception for all datarecipe errors."""

    def __init__(self, message: str, context: dict | None = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


class RecipeError(DataRecipeError):
    """Raised when recipe construction, configuration or training setup fails."""

    pass


class DuplicateVariableError(RecipeError):
    """Raised when the requested variable list contains repeated names."""

    pass


class UnknownVariableError(RecipeError):
    """Raised when a requested variable is not a column of the data."""

    pass


class RoleLengthMismatchError(RecipeError):
    """Raised when roles are supplied with a different length than the variables."""

    pass


class MalformedSpecificationError(RecipeError):
    """Raised when a formula cannot be split into outcome and predictor groups."""

    pass


class NoStepsError(RecipeError):
    """Raised when training a recipe that has no steps."""

    pass


class StepError(DataRecipeError):
    """Raised when a built-in step is misconfigured or fails to execute."""

    pass


class RoleFilterWarning(UserWarning):
    """Warned when a role filter matches nothing and all columns are returned."""

    pass
