"""Cast columns step."""

from typing import Any

import pyarrow as pa

from datarecipe.core.batch import ArrowBatch
from datarecipe.core.exceptions import StepError
from datarecipe.core.type_mapping import STRING_TO_ARROW_TYPE, string_to_arrow_type
from datarecipe.steps.base import BaseStep
from datarecipe.steps.registry import register_step


class CastColumnsStep(BaseStep):
    """Casts columns to the given types. Learns nothing from data.

    A cast that changes a column's structural type (e.g. int to str) yields
    a new metadata row for the column when the recipe is trained.

    Config:
        columns: dict mapping column names to target types
                 e.g., {"age": "int", "price": "float", "zip": "str"}
    """

    step_type = "cast"
    label = "Casting"

    def __init__(self, config: dict[str, Any] | None = None):
        """Initialize with column type mapping.

        Raises:
            StepError: If columns config is missing or contains invalid types.
        """
        super().__init__(config)
        columns = self.config.get("columns")
        if not columns:
            raise StepError(
                "cast requires 'columns' configuration",
                context={"config": self.config},
            )
        if not isinstance(columns, dict):
            raise StepError(
                "cast 'columns' must be a dictionary",
                context={"columns_type": type(columns).__name__},
            )
        invalid_types = [
            (col, typ)
            for col, typ in columns.items()
            if str(typ).lower() not in STRING_TO_ARROW_TYPE
        ]
        if invalid_types:
            raise StepError(
                f"Unsupported types: {invalid_types}",
                context={
                    "invalid_types": invalid_types,
                    "supported_types": list(STRING_TO_ARROW_TYPE.keys()),
                },
            )
        self._columns = columns

    def _fit(self, data: ArrowBatch) -> None:
        self._require_columns(data, list(self._columns))

    def _transform(self, data: ArrowBatch) -> ArrowBatch:
        self._require_columns(data, list(self._columns))
        arrow_table = data.to_arrow()

        new_fields = []
        for field in arrow_table.schema:
            if field.name in self._columns:
                target = string_to_arrow_type(self._columns[field.name])
                new_fields.append(pa.field(field.name, target, nullable=field.nullable))
            else:
                new_fields.append(field)

        try:
            cast_table = arrow_table.cast(pa.schema(new_fields), safe=False)
        except (pa.ArrowInvalid, pa.ArrowTypeError, pa.ArrowNotImplementedError) as e:
            raise StepError(
                f"Cast failed: {e}",
                context={"columns": self._columns, "error": str(e)},
            ) from e

        return data.with_table(cast_table)

    def _describe_terms(self) -> str:
        return ", ".join(f"{col} as {typ}" for col, typ in self._columns.items())


@register_step("cast")
def create_cast_step(config: dict[str, Any]) -> CastColumnsStep:
    """Factory function for CastColumnsStep."""
    return CastColumnsStep(config)
