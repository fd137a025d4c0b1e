"""Unit tests for ArrowBatch implementation."""

import pyarrow as pa
import pytest

from datarecipe.core.batch import ArrowBatch


class TestArrowBatch:
    """Test ArrowBatch class implementation."""

    def test_init_from_table(self):
        """Test ArrowBatch creation from Arrow table."""
        table = pa.table({"id": [1, 2, 3], "name": ["Alice", "Bob", "Charlie"]})
        batch = ArrowBatch(table, {"source": "test"})

        assert batch.columns == ["id", "name"]
        assert batch.row_count == 3
        assert batch.metadata == {"source": "test"}

    def test_from_pydict(self):
        """Columns keep the mapping's order."""
        batch = ArrowBatch.from_pydict({"b": [1], "a": [2]})
        assert batch.columns == ["b", "a"]
        assert batch.to_pydict() == {"b": [1], "a": [2]}


class TestCoerce:
    """Tests for ArrowBatch.coerce."""

    def test_batch_passes_through(self, sample_batch):
        assert ArrowBatch.coerce(sample_batch) is sample_batch

    def test_wraps_table(self):
        table = pa.table({"x": [1, 2]})
        batch = ArrowBatch.coerce(table)
        assert batch.to_arrow() is table

    def test_wraps_mapping(self):
        batch = ArrowBatch.coerce({"x": [1, 2]})
        assert batch.columns == ["x"]

    def test_rejects_other_values(self):
        with pytest.raises(TypeError, match="Expected ArrowBatch"):
            ArrowBatch.coerce([[1, 2]])


class TestSelect:
    """Tests for column narrowing."""

    def test_select_reorders(self, sample_batch):
        """select returns exactly the requested columns in the requested order."""
        narrowed = sample_batch.select(["y", "a"])
        assert narrowed.columns == ["y", "a"]
        assert narrowed.row_count == 4

    def test_select_copies_metadata(self, sample_batch):
        narrowed = sample_batch.select(["a"])
        narrowed.metadata["changed"] = True
        assert "changed" not in sample_batch.metadata

    def test_select_to_no_columns(self, sample_batch):
        assert sample_batch.select([]).columns == []

    def test_missing_columns(self, sample_batch):
        assert sample_batch.missing_columns(["a", "zz", "y", "qq"]) == ["zz", "qq"]

    def test_equals(self, sample_batch):
        assert sample_batch.equals(ArrowBatch(sample_batch.to_arrow()))
        assert not sample_batch.equals(sample_batch.select(["a"]))
