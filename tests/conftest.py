"""Pytest configuration and shared fixtures."""

import logging
import tempfile
from pathlib import Path

import pytest

from datarecipe.core.batch import ArrowBatch


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def recipe_dir(temp_dir):
    """Create a recipes subdirectory in temp_dir."""
    recipes_dir = temp_dir / "recipes"
    recipes_dir.mkdir()
    return recipes_dir


@pytest.fixture
def sample_batch():
    """Mixed-type batch: two numeric predictors, one nominal, one outcome."""
    return ArrowBatch.from_pydict(
        {
            "a": [1.0, 2.0, 3.0, 4.0],
            "b": [10, 20, 30, 40],
            "color": ["red", "blue", "red", "green"],
            "y": [0.5, 1.5, 2.5, 3.5],
        },
        metadata={"source": "test"},
    )


@pytest.fixture
def new_batch():
    """Batch with the same columns as sample_batch plus an extra column."""
    return ArrowBatch.from_pydict(
        {
            "extra": ["x", "y"],
            "y": [9.0, 8.0],
            "color": ["green", "purple"],
            "b": [50, 60],
            "a": [5.0, 6.0],
        }
    )


@pytest.fixture(autouse=True)
def reset_datarecipe_logger():
    """Drop handlers installed by configure_logging during a test."""
    yield
    logging.getLogger("datarecipe").handlers.clear()
