"""Human-readable recipe summaries."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

if TYPE_CHECKING:
    from datarecipe.models.recipe import Recipe


def describe(recipe: "Recipe", form_width: int = 30) -> str:
    """Summarize a recipe: variables per role, then one line per step.

    Args:
        recipe: Recipe to summarize
        form_width: Characters of column names shown per step
    """
    counts = recipe.var_info.role_counts()
    role_width = max([len("role")] + [len(role) for role in counts])
    count_header = "#variables"

    lines = ["Data Recipe", "", "Inputs:", ""]
    lines.append(f"{'role':>{role_width}} {count_header}")
    for role, count in counts.items():
        lines.append(f"{role:>{role_width}} {count:>{len(count_header)}}")

    if recipe.steps:
        lines.extend(["", "Steps:", ""])
        lines.extend(step.describe(form_width=form_width) for step in recipe.steps)

    return "\n".join(lines)


def print_recipe(recipe: "Recipe", form_width: int = 30) -> "Recipe":
    """Echo the recipe summary and return the recipe unchanged."""
    click.echo(describe(recipe, form_width=form_width))
    return recipe
