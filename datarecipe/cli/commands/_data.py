"""CSV input and output for CLI commands."""

import io

import pyarrow.csv as pa_csv

from datarecipe.core.batch import ArrowBatch


def read_csv(path: str) -> ArrowBatch:
    """Read a CSV file into a batch, letting Arrow infer column types."""
    return ArrowBatch(pa_csv.read_csv(path), metadata={"path": path})


def write_csv(batch: ArrowBatch, path: str | None) -> str | None:
    """Write batch to path, or return the CSV text when path is None."""
    if path is not None:
        pa_csv.write_csv(batch.to_arrow(), path)
        return None
    buffer = io.BytesIO()
    pa_csv.write_csv(batch.to_arrow(), buffer)
    return buffer.getvalue().decode("utf-8")
