"""Tests for recipe loader."""

import pytest

from datarecipe.core.exceptions import RecipeError
from datarecipe.models.loader import load_recipe_config
from datarecipe.models.recipe_config import RecipeConfig


class TestRecipeLoader:
    """Tests for recipe loading functionality."""

    def test_load_simple_recipe(self, recipe_dir):
        """Test loading a simple recipe from YAML."""
        recipe_file = recipe_dir / "simple.yaml"
        recipe_file.write_text(
            """
name: simple_recipe
formula: y ~ a + b
steps:
  - type: center
    columns: [a, b]
  - type: scale
runtime:
  verbose: false
"""
        )
        config = load_recipe_config(str(recipe_file))
        assert config.name == "simple_recipe"
        assert config.formula == "y ~ a + b"
        assert [s.type for s in config.steps] == ["center", "scale"]
        assert config.steps[0].step_options() == {"columns": ["a", "b"]}
        assert config.runtime.verbose is False

    def test_from_yaml_delegates_to_loader(self, recipe_dir):
        recipe_file = recipe_dir / "vars.yaml"
        recipe_file.write_text(
            """
name: by_vars
vars: [a, y]
roles: [predictor, outcome]
"""
        )
        config = RecipeConfig.from_yaml(str(recipe_file))
        assert config.vars == ["a", "y"]
        assert config.roles == ["predictor", "outcome"]

    def test_missing_file_raises(self, recipe_dir):
        """Test that a missing file raises RecipeError."""
        with pytest.raises(RecipeError) as exc_info:
            load_recipe_config(str(recipe_dir / "missing.yaml"))

        assert "Recipe file not found" in str(exc_info.value)

    def test_invalid_yaml_raises(self, recipe_dir):
        """Test that malformed YAML raises RecipeError."""
        recipe_file = recipe_dir / "broken.yaml"
        recipe_file.write_text("name: [unclosed\n")

        with pytest.raises(RecipeError) as exc_info:
            load_recipe_config(str(recipe_file))

        assert "Invalid YAML" in str(exc_info.value)
        assert exc_info.value.context["path"] == str(recipe_file)

    def test_non_dict_yaml_raises(self, recipe_dir):
        """Test that a YAML list is rejected."""
        recipe_file = recipe_dir / "list.yaml"
        recipe_file.write_text("- a\n- b\n")

        with pytest.raises(RecipeError, match="must contain a YAML dictionary"):
            load_recipe_config(str(recipe_file))

    def test_empty_file_raises(self, recipe_dir):
        recipe_file = recipe_dir / "empty.yaml"
        recipe_file.write_text("")

        with pytest.raises(RecipeError, match="must contain a YAML dictionary"):
            load_recipe_config(str(recipe_file))

    def test_validation_failure_raises(self, recipe_dir):
        """Test that schema violations are wrapped in RecipeError."""
        recipe_file = recipe_dir / "invalid.yaml"
        recipe_file.write_text(
            """
name: invalid
formula: y ~ a
vars: [a, y]
"""
        )

        with pytest.raises(RecipeError) as exc_info:
            load_recipe_config(str(recipe_file))

        assert "Recipe validation failed" in str(exc_info.value)
        assert exc_info.value.context["path"] == str(recipe_file)
