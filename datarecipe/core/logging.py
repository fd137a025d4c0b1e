"""Structured logging configuration for datarecipe."""

import logging
import sys
from typing import IO, Optional

from json_log_formatter import JSONFormatter


def configure_logging(
    level: str = "INFO",
    json_format: bool = False,
    recipe_name: Optional[str] = None,
    stream: Optional[IO[str]] = None,
) -> None:
    """Configure logging for datarecipe.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_format: If True, use JSON format; otherwise use normal format
        recipe_name: Optional recipe name to include in every log record
        stream: Stream to log to (default: stdout)
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger("datarecipe")
    logger.setLevel(log_level)

    # Remove existing handlers
    logger.handlers.clear()

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setLevel(log_level)

    if json_format:
        formatter = JSONFormatter()
    else:
        formatter = StructuredFormatter()

    handler.setFormatter(formatter)
    if recipe_name:
        handler.addFilter(RecipeNameFilter(recipe_name))
    logger.addHandler(handler)


class RecipeNameFilter(logging.Filter):
    """Stamps a fixed recipe name onto records that do not carry one."""

    def __init__(self, recipe_name: str):
        super().__init__()
        self.recipe_name = recipe_name

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "recipe_name"):
            record.recipe_name = self.recipe_name
        return True


class StructuredFormatter(logging.Formatter):
    """Structured formatter that adds context to log messages."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with context."""
        context = getattr(record, "context", {})

        parts = [f"[{record.levelname}]"]

        if hasattr(record, "recipe_name"):
            parts.append(f"recipe={record.recipe_name}")

        if hasattr(record, "step_index"):
            parts.append(f"step={record.step_index}")

        for key, value in context.items():
            parts.append(f"{key}={value}")

        parts.append(record.getMessage())

        return " ".join(parts)
