"""Tests for logging configuration and error formatting."""

import io
import json
import logging

from datarecipe.core.exceptions import (
    DataRecipeError,
    NoStepsError,
    RecipeError,
    StepError,
)
from datarecipe.core.logging import StructuredFormatter, configure_logging


def _record(message, **extra):
    record = logging.LogRecord("datarecipe.test", logging.INFO, __file__, 1, message, None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestStructuredFormatter:
    """Tests for StructuredFormatter."""

    def test_plain_message(self):
        assert StructuredFormatter().format(_record("hello")) == "[INFO] hello"

    def test_recipe_step_and_context(self):
        record = _record(
            "trained", recipe_name="housing", step_index=2, context={"rows": 4}
        )
        assert (
            StructuredFormatter().format(record)
            == "[INFO] recipe=housing step=2 rows=4 trained"
        )


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_writes_to_stream_with_recipe_name(self):
        stream = io.StringIO()
        configure_logging(level="debug", recipe_name="housing", stream=stream)

        logging.getLogger("datarecipe.core.trainer").info("step 1 center training")

        assert stream.getvalue() == "[INFO] recipe=housing step 1 center training\n"
        assert logging.getLogger("datarecipe").level == logging.DEBUG

    def test_level_filters_records(self):
        stream = io.StringIO()
        configure_logging(level="WARNING", stream=stream)

        logging.getLogger("datarecipe").info("hidden")
        logging.getLogger("datarecipe").warning("shown")

        assert stream.getvalue() == "[WARNING] shown\n"

    def test_json_format(self):
        stream = io.StringIO()
        configure_logging(json_format=True, stream=stream)

        logging.getLogger("datarecipe").info("trained", extra={"step_index": 1})

        payload = json.loads(stream.getvalue())
        assert payload["message"] == "trained"
        assert payload["step_index"] == 1

    def test_reconfigure_replaces_handler(self):
        configure_logging(stream=io.StringIO())
        configure_logging(stream=io.StringIO())
        assert len(logging.getLogger("datarecipe").handlers) == 1


class TestExceptions:
    """Tests for the exception hierarchy."""

    def test_context_rendered_in_str(self):
        error = StepError("Cast failed", context={"column": "a"})
        assert str(error) == "Cast failed (column=a)"
        assert error.message == "Cast failed"

    def test_without_context(self):
        error = NoStepsError("Add some steps before training the recipe")
        assert str(error) == "Add some steps before training the recipe"
        assert error.context == {}

    def test_hierarchy(self):
        assert issubclass(NoStepsError, RecipeError)
        assert issubclass(RecipeError, DataRecipeError)
        assert not issubclass(StepError, RecipeError)
