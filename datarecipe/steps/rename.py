"""Rename columns step."""

from typing import Any

from datarecipe.core.batch import ArrowBatch
from datarecipe.core.exceptions import StepError
from datarecipe.steps.base import BaseStep
from datarecipe.steps.registry import register_step


class RenameColumnsStep(BaseStep):
    """Renames columns according to a mapping. Learns nothing from data.

    Config:
        mapping: dict mapping old column names to new column names
                 e.g., {"old_name": "new_name", "id": "user_id"}
    """

    step_type = "rename_columns"
    label = "Renaming"

    def __init__(self, config: dict[str, Any] | None = None):
        """Initialize with rename mapping.

        Raises:
            StepError: If mapping is missing or invalid.
        """
        super().__init__(config)
        mapping = self.config.get("mapping")
        if not mapping:
            raise StepError(
                "rename_columns requires 'mapping' configuration",
                context={"config": self.config},
            )
        if not isinstance(mapping, dict):
            raise StepError(
                "rename_columns 'mapping' must be a dictionary",
                context={"mapping_type": type(mapping).__name__},
            )
        self._mapping = mapping

    def _fit(self, data: ArrowBatch) -> None:
        self._require_columns(data, list(self._mapping))

    def _transform(self, data: ArrowBatch) -> ArrowBatch:
        self._require_columns(data, list(self._mapping))
        new_columns = [self._mapping.get(col, col) for col in data.columns]
        return data.with_table(data.to_arrow().rename_columns(new_columns))

    def _describe_terms(self) -> str:
        return ", ".join(f"{old} -> {new}" for old, new in self._mapping.items())


@register_step("rename_columns")
def create_rename_step(config: dict[str, Any]) -> RenameColumnsStep:
    """Factory function for RenameColumnsStep."""
    return RenameColumnsStep(config)
