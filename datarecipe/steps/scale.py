"""Scaling step: divide numeric columns by their training standard deviation."""

import logging
from typing import Any

import pyarrow as pa
import pyarrow.compute as pc

from datarecipe.core.batch import ArrowBatch
from datarecipe.core.exceptions import StepError
from datarecipe.steps.base import ColumnStep
from datarecipe.steps.registry import register_step

logger = logging.getLogger(__name__)


class ScaleStep(ColumnStep):
    """Divides each column by its training sample standard deviation.

    Columns with zero spread are left unscaled.

    Config:
        columns: optional list of numeric columns (default: all numeric)
    """

    step_type = "scale"
    label = "Scaling"

    def __init__(self, config: dict[str, Any] | None = None):
        super().__init__(config)
        self.sds: dict[str, float] = {}

    def _fit(self, data: ArrowBatch) -> None:
        columns = self._resolve_columns(data)
        self._check_types(data, columns)
        self.columns = columns
        self.sds = {}
        for name in columns:
            sd = pc.stddev(data.column(name), ddof=1).as_py()
            if sd is None:
                raise StepError(
                    f"Column '{name}' needs at least two non-missing values to scale",
                    context={"step_type": self.step_type, "column": name},
                )
            if sd == 0:
                logger.warning(
                    "Column has zero standard deviation; leaving it unscaled",
                    extra={"context": {"column": name}},
                )
                sd = 1.0
            self.sds[name] = float(sd)

    def _transform(self, data: ArrowBatch) -> ArrowBatch:
        self._require_columns(data, self.columns)
        return self._replace_columns(
            data,
            {
                name: pc.divide(pc.cast(data.column(name), pa.float64()), self.sds[name])
                for name in self.columns
            },
        )


@register_step("scale")
def create_scale_step(config: dict[str, Any]) -> ScaleStep:
    """Factory function for ScaleStep."""
    return ScaleStep(config)
