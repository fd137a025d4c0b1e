"""Arrow-backed tabular dataset passed between recipes and steps."""

from typing import Any, Mapping

import pyarrow as pa


class ArrowBatch:
    """Arrow-based batch implementation using PyArrow.

    Column order and presence are significant: recipes narrow and project
    batches by column name. Row order is carried through untouched.
    """

    def __init__(self, table: pa.Table, metadata: dict[str, Any] | None = None):
        """Initialize from Arrow table.

        Args:
            table: PyArrow Table containing the data
            metadata: Optional metadata dictionary
        """
        self._table = table
        self._metadata = metadata or {}

    @classmethod
    def from_pydict(
        cls,
        data: Mapping[str, list[Any]],
        metadata: dict[str, Any] | None = None,
    ) -> "ArrowBatch":
        """Create ArrowBatch from a mapping of column name to values."""
        return cls(pa.table(dict(data)), metadata)

    @classmethod
    def coerce(cls, data: "ArrowBatch | pa.Table | Mapping[str, list[Any]]") -> "ArrowBatch":
        """Wrap a table or column mapping, passing batches through unchanged.

        Raises:
            TypeError: If data is not a supported tabular value
        """
        if isinstance(data, ArrowBatch):
            return data
        if isinstance(data, pa.Table):
            return cls(data)
        if isinstance(data, Mapping):
            return cls.from_pydict(data)
        raise TypeError(
            f"Expected ArrowBatch, pyarrow.Table or mapping, got {type(data).__name__}"
        )

    @property
    def columns(self) -> list[str]:
        """Return column names from Arrow schema."""
        return self._table.column_names

    @property
    def row_count(self) -> int:
        """Return number of rows."""
        return len(self._table)

    @property
    def schema(self) -> pa.Schema:
        """Return the Arrow schema."""
        return self._table.schema

    @property
    def metadata(self) -> dict[str, Any]:
        """Return metadata dictionary."""
        return self._metadata

    def column(self, name: str) -> pa.ChunkedArray:
        """Return a single column by name."""
        return self._table.column(name)

    def missing_columns(self, names: list[str]) -> list[str]:
        """Return the names that are not columns of this batch, in order."""
        present = set(self.columns)
        return [name for name in names if name not in present]

    def select(self, names: list[str]) -> "ArrowBatch":
        """Return a batch with exactly the given columns in the given order."""
        return ArrowBatch(self._table.select(names), metadata=self._metadata.copy())

    def with_table(self, table: pa.Table) -> "ArrowBatch":
        """Return a new batch over table, carrying this batch's metadata."""
        return ArrowBatch(table, metadata=self._metadata.copy())

    def to_arrow(self) -> pa.Table:
        """Return underlying Arrow table for zero-copy operations."""
        return self._table

    def to_pydict(self) -> dict[str, list[Any]]:
        """Return the data as a mapping of column name to values."""
        return self._table.to_pydict()

    def equals(self, other: "ArrowBatch") -> bool:
        """Return True when both batches hold identical tables."""
        return self._table.equals(other.to_arrow())
