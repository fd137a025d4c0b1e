"""Recipe application: run trained steps over new data."""

from __future__ import annotations

import logging
import warnings
from typing import TYPE_CHECKING, Optional, Sequence

from datarecipe.core.batch import ArrowBatch
from datarecipe.core.exceptions import RoleFilterWarning

if TYPE_CHECKING:
    from datarecipe.models.recipe import DataLike, Recipe

logger = logging.getLogger(__name__)

ALL_ROLES = "all"


def apply(
    recipe: "Recipe",
    new_data: Optional["DataLike"] = None,
    roles: str | Sequence[str] = ALL_ROLES,
) -> ArrowBatch:
    """Apply every step of a recipe to new data, in order.

    Steps are applied as they are; whether an untrained step can be applied
    is up to the step. The recipe is never modified.

    Args:
        recipe: Trained recipe
        new_data: Data to transform (default: the recipe template)
        roles: ``"all"``, or one or more roles; only columns whose
            ``term_info`` role is among them are returned, in the result's
            column order. When no ``term_info`` row has a requested role, a
            RoleFilterWarning is issued and every column is returned.

    Returns:
        Transformed batch

    Raises:
        UnknownVariableError: If new_data lacks a recipe variable
    """
    from datarecipe.models.recipe import narrow

    data = recipe.template if new_data is None else new_data
    batch = narrow(data, recipe.var_info.names())

    for step in recipe.steps:
        batch = step.apply(batch)

    requested = [roles] if isinstance(roles, str) else list(roles)
    if ALL_ROLES in requested:
        return batch

    matched = recipe.term_info.with_roles(requested)
    if not len(matched):
        existing = ", ".join(sorted({var.role or "" for var in recipe.term_info.variables}))
        message = (
            "No matching `roles` were found; returning everything instead. "
            f"Existing roles are: {existing}"
        )
        logger.warning(message, extra={"context": {"requested_roles": requested}})
        warnings.warn(message, RoleFilterWarning, stacklevel=2)
        return batch

    keepers = set(matched.names())
    return batch.select([name for name in batch.columns if name in keepers])
