"""Recipe training: fit each step on the output of the steps before it."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from datarecipe.core.batch import ArrowBatch
from datarecipe.core.exceptions import NoStepsError
from datarecipe.core.inference import TypeClassifier, classify
from datarecipe.models.variable import DERIVED, VariableInfo
from datarecipe.steps.base import Step

if TYPE_CHECKING:
    from datarecipe.models.recipe import DataLike, Recipe

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TrainingState:
    """Rolling data and metadata threaded from one step to the next."""

    data: ArrowBatch
    term_info: VariableInfo


def train(
    recipe: "Recipe",
    training: Optional["DataLike"] = None,
    fresh: bool = False,
    verbose: bool = True,
) -> "Recipe":
    """Train every step of a recipe, in order.

    Each untrained step (or every step, when ``fresh``) is trained on the
    data as transformed by all earlier steps, then applied to produce the
    next step's input, and the metadata of the resulting columns is merged
    into ``term_info``. Steps that are already trained are only applied.

    The recipe's step list and ``term_info`` are updated after every step,
    so if a step raises, the work of the earlier steps is kept.

    Args:
        recipe: Recipe to train (updated in place)
        training: Training data (default: the recipe template)
        fresh: Retrain steps that are already trained
        verbose: Log one progress notice per step

    Returns:
        The same recipe

    Raises:
        NoStepsError: If the recipe has no steps
        UnknownVariableError: If training data lacks a recipe variable
    """
    from datarecipe.models.recipe import narrow

    if not recipe.steps:
        raise NoStepsError(
            "Add some steps before training the recipe",
            context={"recipe_name": recipe.name} if recipe.name else None,
        )

    data = recipe.template if training is None else training
    state = TrainingState(
        data=narrow(data, recipe.var_info.names()),
        term_info=recipe.term_info,
    )

    for index, step in enumerate(recipe.steps):
        state, trained_step = train_step(
            state,
            step,
            index,
            fresh=fresh,
            verbose=verbose,
            classifier=recipe.classifier,
            recipe_name=recipe.name,
        )
        recipe.steps[index] = trained_step
        recipe.term_info = state.term_info

    return recipe


def train_step(
    state: TrainingState,
    step: Step,
    index: int,
    fresh: bool = False,
    verbose: bool = True,
    classifier: TypeClassifier = classify,
    recipe_name: Optional[str] = None,
) -> tuple[TrainingState, Step]:
    """Train (or skip) one step and advance the rolling state.

    A step that is already trained, with ``fresh`` off, keeps its parameters
    and leaves the metadata alone, but is still applied so later steps see
    its output.
    """
    note = f"step {index + 1} {step_label(step)}"
    extra = {"step_index": index + 1}
    if recipe_name:
        extra["recipe_name"] = recipe_name

    if step.trained and not fresh:
        if verbose:
            logger.info(f"{note} [pre-trained]", extra=extra)
        return TrainingState(step.apply(state.data), state.term_info), step

    if verbose:
        logger.info(f"{note} training", extra=extra)

    trained = step.train(state.data)
    data = trained.apply(state.data)
    term_info = (
        state.term_info.merge_types(classifier(data))
        .fill_roles(trained.role)
        .fill_sources(DERIVED)
    )
    return TrainingState(data, term_info), trained


def step_label(step: Step) -> str:
    """Short name of a step for progress notices."""
    step_type = getattr(step, "step_type", None)
    if step_type:
        return step_type
    name = type(step).__name__
    if name.endswith("Step") and len(name) > 4:
        name = name[:-4]
    return name.lower()
