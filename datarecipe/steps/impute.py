"""Mean imputation step."""

from typing import Any

import pyarrow as pa
import pyarrow.compute as pc

from datarecipe.core.batch import ArrowBatch
from datarecipe.steps.base import ColumnStep
from datarecipe.steps.center import column_mean
from datarecipe.steps.registry import register_step


class ImputeMeanStep(ColumnStep):
    """Replaces missing values with the training mean.

    Imputed columns are returned as float64.

    Config:
        columns: optional list of numeric columns (default: all numeric)
    """

    step_type = "impute_mean"
    label = "Mean imputation"

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
                name: pc.fill_null(
                    pc.cast(data.column(name), pa.float64()), self.means[name]
                )
                for name in self.columns
            },
        )


@register_step("impute_mean")
def create_impute_mean_step(config: dict[str, Any]) -> ImputeMeanStep:
    """Factory function for ImputeMeanStep."""
    return ImputeMeanStep(config)
