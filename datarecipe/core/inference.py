"""Structural type classification for batches."""

from __future__ import annotations

from typing import Callable

from datarecipe.core.batch import ArrowBatch
from datarecipe.core.type_mapping import arrow_type_to_structural

TypeClassifier = Callable[[ArrowBatch], dict[str, str]]


def classify(batch: ArrowBatch) -> dict[str, str]:
    """Map every column of batch to its structural type, in column order."""
    return {
        field.name: arrow_type_to_structural(field.type) for field in batch.schema
    }
