"""Step protocol and shared base class for preprocessing steps."""

import copy
from typing import Any, Optional, Protocol, runtime_checkable

import pyarrow as pa

from datarecipe.core.batch import ArrowBatch
from datarecipe.core.exceptions import StepError
from datarecipe.core.type_mapping import arrow_type_to_structural


@runtime_checkable
class Step(Protocol):
    """Capability set a recipe needs from every step.

    ``train`` returns a trained step and must not be relied on to mutate the
    receiver. ``apply`` transforms a batch using the trained parameters.
    ``role`` is assigned to columns the step derives, or None.
    """

    trained: bool
    role: Optional[str]

    def train(self, data: ArrowBatch) -> "Step": ...

    def apply(self, data: ArrowBatch) -> ArrowBatch: ...

    def describe(self, form_width: int = 30) -> str: ...


class BaseStep:
    """Base class for built-in steps configured from a dict.

    Subclasses set ``step_type`` and ``label`` and implement ``_fit`` (which
    stores trained parameters on self) and ``_transform``.
    """

    step_type: str = "step"
    label: str = "Step"

    def __init__(self, config: dict[str, Any] | None = None):
        config = dict(config or {})
        self.config = config
        self.role: Optional[str] = config.get("role")
        self.trained: bool = False

    def train(self, data: ArrowBatch) -> "BaseStep":
        """Return a trained copy of this step fitted on data."""
        trained = copy.deepcopy(self)
        trained._fit(data)
        trained.trained = True
        return trained

    def apply(self, data: ArrowBatch) -> ArrowBatch:
        """Transform data with the trained parameters.

        Raises:
            StepError: If the step has not been trained
        """
        if not self.trained:
            raise StepError(
                f"Step '{self.step_type}' must be trained before it is applied",
                context={"step_type": self.step_type},
            )
        return self._transform(data)

    def describe(self, form_width: int = 30) -> str:
        """Return a one-line description of the step."""
        terms = self._describe_terms()
        if len(terms) > form_width:
            terms = terms[: max(form_width - 3, 0)] + "..."
        status = " [trained]" if self.trained else ""
        return f"{self.label} for {terms}{status}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(trained={self.trained}, role={self.role!r})"

    def _describe_terms(self) -> str:
        return ", ".join(self.config.get("columns") or []) or "(all applicable)"

    def _require_columns(self, data: ArrowBatch, names: list[str]) -> None:
        missing = data.missing_columns(names)
        if missing:
            raise StepError(
                f"Columns not found in batch: {missing}",
                context={
                    "step_type": self.step_type,
                    "missing_columns": missing,
                    "available_columns": data.columns,
                },
            )

    def _fit(self, data: ArrowBatch) -> None:
        raise NotImplementedError

    def _transform(self, data: ArrowBatch) -> ArrowBatch:
        raise NotImplementedError


class ColumnStep(BaseStep):
    """Base for steps operating on a list of columns of one structural type.

    When ``columns`` is not configured, every column of ``selects_type`` in
    the training data is used. The resolved list is fixed at training time.
    """

    selects_type: str = "numeric"

    def __init__(self, config: dict[str, Any] | None = None):
        super().__init__(config)
        columns = self.config.get("columns")
        if columns is not None and not isinstance(columns, list):
            raise StepError(
                f"{self.step_type} 'columns' must be a list",
                context={"columns_type": type(columns).__name__},
            )
        self.columns: list[str] = list(columns or [])

    def _resolve_columns(self, data: ArrowBatch) -> list[str]:
        if self.config.get("columns"):
            self._require_columns(data, self.columns)
            return list(self.columns)
        return [
            field.name
            for field in data.schema
            if arrow_type_to_structural(field.type) == self.selects_type
        ]

    def _check_types(self, data: ArrowBatch, columns: list[str]) -> None:
        wrong = [
            name
            for name in columns
            if arrow_type_to_structural(data.schema.field(name).type)
            != self.selects_type
        ]
        if wrong:
            raise StepError(
                f"{self.step_type} requires {self.selects_type} columns: {wrong}",
                context={"step_type": self.step_type, "columns": wrong},
            )

    def _replace_columns(
        self, data: ArrowBatch, replacements: dict[str, pa.Array]
    ) -> ArrowBatch:
        """Return data with the named columns swapped for new arrays in place."""
        table = data.to_arrow()
        for name, values in replacements.items():
            index = table.column_names.index(name)
            table = table.set_column(index, name, values)
        return data.with_table(table)

    def _describe_terms(self) -> str:
        return ", ".join(self.columns) or f"all {self.selects_type} columns"
