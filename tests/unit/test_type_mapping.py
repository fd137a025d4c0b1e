"""Tests for type mapping and structural type classification."""

from datetime import date, datetime

import pyarrow as pa
import pytest

from datarecipe.core.batch import ArrowBatch
from datarecipe.core.inference import classify
from datarecipe.core.type_mapping import (
    arrow_type_to_structural,
    string_to_arrow_type,
)


class TestArrowTypeToStructural:
    """Tests for arrow_type_to_structural."""

    @pytest.mark.parametrize(
        "arrow_type, expected",
        [
            (pa.int64(), "numeric"),
            (pa.int8(), "numeric"),
            (pa.float32(), "numeric"),
            (pa.decimal128(10, 2), "numeric"),
            (pa.string(), "nominal"),
            (pa.large_string(), "nominal"),
            (pa.dictionary(pa.int32(), pa.string()), "nominal"),
            (pa.bool_(), "logical"),
            (pa.date32(), "date"),
            (pa.timestamp("us"), "date"),
            (pa.binary(), "other"),
            (pa.null(), "other"),
            (pa.list_(pa.int64()), "other"),
        ],
    )
    def test_classification(self, arrow_type, expected):
        assert arrow_type_to_structural(arrow_type) == expected


class TestStringToArrowType:
    """Tests for string_to_arrow_type."""

    def test_known_names(self):
        assert string_to_arrow_type("int") == pa.int64()
        assert string_to_arrow_type("STR") == pa.string()
        assert string_to_arrow_type("datetime") == pa.timestamp("us")

    def test_unknown_name_raises(self):
        with pytest.raises(ValueError, match="Unsupported type name"):
            string_to_arrow_type("complex")


class TestClassify:
    """Tests for the batch type classifier."""

    def test_classify_mixed_batch(self):
        batch = ArrowBatch.from_pydict(
            {
                "n": [1, 2],
                "s": ["a", "b"],
                "flag": [True, False],
                "d": [date(2024, 1, 1), date(2024, 1, 2)],
                "ts": [datetime(2024, 1, 1), datetime(2024, 1, 2)],
            }
        )
        assert classify(batch) == {
            "n": "numeric",
            "s": "nominal",
            "flag": "logical",
            "d": "date",
            "ts": "date",
        }

    def test_classify_keeps_column_order(self, sample_batch):
        assert list(classify(sample_batch)) == ["a", "b", "color", "y"]
