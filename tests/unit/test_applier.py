"""Tests for applying trained recipes."""

import warnings

import pytest

from datarecipe.core.applier import apply
from datarecipe.core.batch import ArrowBatch
from datarecipe.core.exceptions import RoleFilterWarning, StepError, UnknownVariableError
from datarecipe.models.recipe import Recipe
from datarecipe.steps import CenterStep, DummyStep, ScaleStep


@pytest.fixture
def trained(sample_batch):
    recipe = Recipe.from_formula("y ~ a + b + color", sample_batch)
    recipe.add_step(DummyStep()).add_step(CenterStep({"columns": ["a", "b"]}))
    return recipe.train(verbose=False)


class TestApply:
    """Tests for apply()."""

    def test_defaults_to_template(self, trained):
        result = apply(trained)
        assert result.columns == ["a", "b", "color_green", "color_red", "y"]
        assert result.column("a").to_pylist() == [-1.5, -0.5, 0.5, 1.5]

    def test_new_data_is_narrowed_and_transformed(self, trained, new_batch):
        result = apply(trained, new_batch)

        assert result.columns == ["a", "b", "color_green", "color_red", "y"]
        assert result.column("a").to_pylist() == [2.5, 3.5]
        assert result.column("b").to_pylist() == [25.0, 35.0]
        # unseen level maps to zeros
        assert result.column("color_green").to_pylist() == [1.0, 0.0]
        assert result.column("color_red").to_pylist() == [0.0, 0.0]

    def test_missing_variable_raises(self, trained):
        with pytest.raises(UnknownVariableError):
            apply(trained, ArrowBatch.from_pydict({"a": [1.0]}))

    def test_apply_is_repeatable(self, trained, new_batch):
        first = apply(trained, new_batch)
        second = apply(trained, new_batch)
        assert first.equals(second)

    def test_does_not_mutate_recipe(self, trained, new_batch):
        term_info = trained.term_info.copy_table()
        steps = list(trained.steps)

        apply(trained, new_batch, roles=["predictor"])

        assert trained.term_info == term_info
        assert trained.steps == steps

    def test_untrained_step_is_the_step_problem(self, sample_batch):
        recipe = Recipe.from_data(sample_batch).add_step(ScaleStep())
        with pytest.raises(StepError, match="must be trained"):
            apply(recipe)

    def test_recipe_method_delegates(self, trained, new_batch):
        assert trained.apply(new_batch).equals(apply(trained, new_batch))


class TestRoleFilter:
    """Tests for projecting output columns by role."""

    def test_single_role_string(self, trained):
        result = apply(trained, roles="outcome")
        assert result.columns == ["y"]

    def test_keeps_dataset_column_order(self, trained):
        result = apply(trained, roles=["outcome", "predictor"])
        assert result.columns == ["a", "b", "color_green", "color_red", "y"]

    def test_predictors_only(self, trained):
        result = apply(trained, roles=["predictor"])
        assert result.columns == ["a", "b", "color_green", "color_red"]

    def test_all_in_list_returns_everything(self, trained):
        result = apply(trained, roles=["outcome", "all"])
        assert len(result.columns) == 5

    def test_no_match_warns_and_returns_everything(self, trained):
        everything = apply(trained, roles="all")

        with pytest.warns(RoleFilterWarning, match="Existing roles are: outcome, predictor"):
            result = apply(trained, roles=["nonexistent"])

        assert result.columns == everything.columns

    def test_match_does_not_warn(self, trained):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            apply(trained, roles=["outcome"])
