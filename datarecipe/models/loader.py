"""Recipe configuration loader with YAML parsing."""

from pathlib import Path
from typing import Any, Dict

import yaml

from datarecipe.core.exceptions import RecipeError
from datarecipe.models.recipe_config import RecipeConfig


def load_recipe_config(path: str) -> RecipeConfig:
    """
    Load and validate a recipe configuration from a YAML file.

    Args:
        path: Path to recipe YAML file

    Returns:
        Validated RecipeConfig instance

    Raises:
        RecipeError: If file not found, invalid YAML, or validation fails
    """
    recipe_path = Path(path)
    if not recipe_path.exists():
        raise RecipeError(f"Recipe file not found: {path}")

    recipe_dict = _read_yaml(recipe_path)

    try:
        return RecipeConfig.from_dict(recipe_dict)
    except Exception as e:
        raise RecipeError(
            f"Recipe validation failed: {e}", context={"path": str(path)}
        ) from e


def _read_yaml(recipe_path: Path) -> Dict[str, Any]:
    try:
        with open(recipe_path, "r", encoding="utf-8") as f:
            recipe_dict = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise RecipeError(
            f"Invalid YAML in recipe file: {e}", context={"path": str(recipe_path)}
        ) from e

    if not isinstance(recipe_dict, dict):
        raise RecipeError(
            "Recipe file must contain a YAML dictionary",
            context={"path": str(recipe_path)},
        )
    return recipe_dict
