"""Centering step: subtract the training mean from numeric columns."""

from typing import Any

import pyarrow as pa
import pyarrow.compute as pc

from datarecipe.core.batch import ArrowBatch
from datarecipe.core.exceptions import StepError
from datarecipe.steps.base import ColumnStep
from datarecipe.steps.registry import register_step


class CenterStep(ColumnStep):
    """Subtracts each column's training mean.

    Config:
        columns: optional list of numeric columns (default: all numeric)
    """

    step_type = "center"
    label = "Centering"

    def __init__(self, config: dict[str, Any] | None = None):
        super().__init__(config)
        self.means: dict[str, float] = {}

    def _fit(self, data: ArrowBatch) -> None:
        columns = self._resolve_columns(data)
        self._check_types(data, columns)
        self.columns = columns
        self.means = {name: column_mean(self, data, name) for name in columns}

    def _transform(self, data: ArrowBatch) -> ArrowBatch:
        self._require_columns(data, self.columns)
        return self._replace_columns(
            data,
            {
                name: pc.subtract(
                    pc.cast(data.column(name), pa.float64()), self.means[name]
                )
                for name in self.columns
            },
        )


def column_mean(step: ColumnStep, data: ArrowBatch, name: str) -> float:
    """Return the mean of a column, ignoring missing values.

    Raises:
        StepError: If the column has no non-missing values
    """
    mean = pc.mean(data.column(name)).as_py()
    if mean is None:
        raise StepError(
            f"Column '{name}' has no non-missing values",
            context={"step_type": step.step_type, "column": name},
        )
    return float(mean)


@register_step("center")
def create_center_step(config: dict[str, Any]) -> CenterStep:
    """Factory function for CenterStep."""
    return CenterStep(config)
