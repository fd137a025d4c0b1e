"""Dummy variable step: expand nominal columns into indicator columns."""

import re
from typing import Any

import pyarrow as pa
import pyarrow.compute as pc

from datarecipe.core.batch import ArrowBatch
from datarecipe.core.exceptions import StepError
from datarecipe.core.type_mapping import NOMINAL
from datarecipe.steps.base import ColumnStep
from datarecipe.steps.registry import register_step

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9_.]")


class DummyStep(ColumnStep):
    """Replaces each nominal column with 0/1 indicator columns.

    Levels are learned at training time and sorted. By default the first
    level is the reference and gets no column; ``one_hot: true`` keeps all
    levels. Levels unseen during training map to all zeros. Indicator
    columns are named ``<column>_<level>`` and take the step's role.

    Config:
        columns: optional list of nominal columns (default: all nominal)
        one_hot: keep a column for every level (default: false)
        role: role for the indicator columns (default: 'predictor')
    """

    step_type = "dummy"
    label = "Dummy variables"
    selects_type = NOMINAL

    def __init__(self, config: dict[str, Any] | None = None):
        super().__init__(config)
        self.role = self.config.get("role", "predictor")
        self.one_hot = bool(self.config.get("one_hot", False))
        self.levels: dict[str, list[str]] = {}

    def _fit(self, data: ArrowBatch) -> None:
        columns = self._resolve_columns(data)
        self._check_types(data, columns)
        self.columns = columns
        self.levels = {}
        for name in columns:
            values = pc.unique(_as_strings(data.column(name))).drop_null()
            levels = sorted(values.to_pylist())
            if not levels:
                raise StepError(
                    f"Column '{name}' has no non-missing values",
                    context={"step_type": self.step_type, "column": name},
                )
            self.levels[name] = levels
        self._check_indicator_names(data)

    def _check_indicator_names(self, data: ArrowBatch) -> None:
        """Raise if two indicators, or an indicator and a kept column, share a name."""
        seen: dict[str, str] = {
            name: name for name in data.columns if name not in self.levels
        }
        clashes = []
        for name, levels in self.levels.items():
            for level in levels if self.one_hot else levels[1:]:
                indicator = indicator_name(name, level)
                if indicator in seen:
                    clashes.append((indicator, seen[indicator], f"{name}={level}"))
                else:
                    seen[indicator] = f"{name}={level}"
        if clashes:
            raise StepError(
                f"Indicator column names are not unique: "
                f"{sorted({indicator for indicator, _, _ in clashes})}",
                context={"step_type": self.step_type, "clashes": clashes},
            )

    def _transform(self, data: ArrowBatch) -> ArrowBatch:
        self._require_columns(data, self.columns)
        names: list[str] = []
        arrays: list[pa.ChunkedArray] = []
        table = data.to_arrow()
        for name in table.column_names:
            column = table.column(name)
            if name not in self.levels:
                names.append(name)
                arrays.append(column)
                continue
            values = _as_strings(column)
            levels = self.levels[name]
            for level in levels if self.one_hot else levels[1:]:
                names.append(indicator_name(name, level))
                arrays.append(pc.cast(pc.equal(values, level), pa.float64()))
        return data.with_table(pa.Table.from_arrays(arrays, names=names))


def indicator_name(column: str, level: str) -> str:
    """Return the indicator column name for a level."""
    return f"{column}_{_UNSAFE_CHARS.sub('_', level)}"


def _as_strings(column: pa.ChunkedArray) -> pa.ChunkedArray:
    if pa.types.is_dictionary(column.type):
        column = column.cast(column.type.value_type)
    return pc.cast(column, pa.string())


@register_step("dummy")
def create_dummy_step(config: dict[str, Any]) -> DummyStep:
    """Factory function for DummyStep."""
    return DummyStep(config)
