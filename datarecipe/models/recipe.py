"""Recipe aggregate: variables, column metadata, steps and template data."""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Mapping, Optional, Sequence, Union

import pyarrow as pa

from datarecipe.core.batch import ArrowBatch
from datarecipe.core.exceptions import (
    DuplicateVariableError,
    RoleLengthMismatchError,
    UnknownVariableError,
)
from datarecipe.core.formula import split
from datarecipe.core.inference import TypeClassifier, classify
from datarecipe.models.variable import ORIGINAL, VariableInfo
from datarecipe.steps.base import Step

if TYPE_CHECKING:
    from datarecipe.models.recipe_config import RecipeConfig

logger = logging.getLogger(__name__)

DataLike = Union[ArrowBatch, pa.Table, Mapping[str, list[Any]]]


@dataclass
class Recipe:
    """A sequence of preprocessing steps plus the metadata of the columns they see.

    ``var_info`` describes the columns the recipe was built from and never
    changes. ``term_info`` starts as a copy and grows as training derives new
    columns. ``template`` is the narrowed construction data, used whenever
    no data is passed to ``train`` or ``apply``.
    """

    vars: list[str]
    var_info: VariableInfo
    term_info: VariableInfo
    template: ArrowBatch
    steps: list[Step] = field(default_factory=list)
    name: Optional[str] = None
    classifier: TypeClassifier = field(default=classify, repr=False)

    @classmethod
    def from_data(
        cls,
        data: DataLike,
        vars: Optional[Sequence[str]] = None,
        roles: Optional[Sequence[str]] = None,
        name: Optional[str] = None,
        classifier: TypeClassifier = classify,
    ) -> "Recipe":
        """Build a recipe from data and an optional list of variables and roles.

        Args:
            data: Template data
            vars: Columns to use, in order (default: every column of data)
            roles: One role per variable (default: '' for every variable)
            name: Optional recipe name used in logs
            classifier: Type-info provider mapping a batch to structural types

        Raises:
            DuplicateVariableError: If vars repeats a name
            UnknownVariableError: If a variable is not a column of data
            RoleLengthMismatchError: If roles and vars differ in length
        """
        batch = ArrowBatch.coerce(data)
        variables = list(batch.columns) if vars is None else list(vars)

        duplicates = [n for n, count in Counter(variables).items() if count > 1]
        if duplicates:
            raise DuplicateVariableError(
                "`vars` should have unique members",
                context={"duplicates": duplicates},
            )

        template = narrow(batch, variables)

        if roles is not None:
            roles = list(roles)
            if len(roles) != len(variables):
                raise RoleLengthMismatchError(
                    "The number of roles should be the same as the number of variables",
                    context={"roles": len(roles), "variables": len(variables)},
                )
            role_map = dict(zip(variables, roles))
        else:
            role_map = {}

        var_info = VariableInfo.from_types(
            classifier(template), roles=role_map, source=ORIGINAL
        )
        logger.debug(
            "Created recipe",
            extra={"context": {"variables": len(variables), "rows": template.row_count}},
        )
        return cls(
            vars=variables,
            var_info=var_info,
            term_info=var_info.copy_table(),
            template=template,
            name=name,
            classifier=classifier,
        )

    @classmethod
    def from_formula(
        cls,
        formula: str,
        data: DataLike,
        name: Optional[str] = None,
        classifier: TypeClassifier = classify,
    ) -> "Recipe":
        """Build a recipe whose roles come from a formula like ``y ~ a + b``.

        Right-hand variables become predictors and left-hand variables
        outcomes; predictors are listed first.

        Raises:
            MalformedSpecificationError: If the formula cannot be split
            DuplicateVariableError: If a variable appears twice
            UnknownVariableError: If a variable is not a column of data
        """
        batch = ArrowBatch.coerce(data)
        predictors, outcomes = split(formula, batch)
        roles = ["predictor"] * len(predictors) + ["outcome"] * len(outcomes)
        return cls.from_data(
            batch,
            vars=predictors + outcomes,
            roles=roles,
            name=name,
            classifier=classifier,
        )

    @classmethod
    def from_config(cls, config: "RecipeConfig", data: DataLike) -> "Recipe":
        """Build a recipe and its untrained steps from a RecipeConfig."""
        if config.formula is not None:
            recipe = cls.from_formula(config.formula, data, name=config.name)
        else:
            recipe = cls.from_data(
                data, vars=config.vars, roles=config.roles, name=config.name
            )
        for step in config.build_steps():
            recipe.add_step(step)
        return recipe

    @property
    def trained(self) -> bool:
        """True when the recipe has steps and all of them are trained."""
        return bool(self.steps) and all(step.trained for step in self.steps)

    def add_step(self, step: Step) -> "Recipe":
        """Append a step and return the recipe for chaining."""
        self.steps.append(step)
        return self

    def train(
        self,
        training: Optional[DataLike] = None,
        fresh: bool = False,
        verbose: bool = True,
    ) -> "Recipe":
        """Train the steps in order. See :func:`datarecipe.core.trainer.train`."""
        from datarecipe.core.trainer import train

        return train(self, training=training, fresh=fresh, verbose=verbose)

    def apply(
        self,
        new_data: Optional[DataLike] = None,
        roles: str | Sequence[str] = "all",
    ) -> ArrowBatch:
        """Apply the trained steps. See :func:`datarecipe.core.applier.apply`."""
        from datarecipe.core.applier import apply

        return apply(self, new_data=new_data, roles=roles)

    def describe(self, form_width: int = 30) -> str:
        from datarecipe.core.reporting import describe

        return describe(self, form_width=form_width)

    def __str__(self) -> str:
        return self.describe()


def narrow(data: DataLike, variables: Sequence[str]) -> ArrowBatch:
    """Return data restricted to exactly variables, in that order.

    Raises:
        UnknownVariableError: If a variable is not a column of data
    """
    batch = ArrowBatch.coerce(data)
    missing = batch.missing_columns(list(variables))
    if missing:
        raise UnknownVariableError(
            "1+ elements of `vars` are not in `data`",
            context={"missing_columns": missing, "available_columns": batch.columns},
        )
    return batch.select(list(variables))
