"""Unit tests for logging setup."""

import json
import logging

import pytest

from bookish.services import JSONFormatter, setup_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def make_record(**extra):
    record = logging.LogRecord("bookish.stores", logging.WARNING, __file__, 1, "rejected %s", ("ToggleLike",), None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_includes_core_fields():
    payload = json.loads(JSONFormatter().format(make_record()))
    assert payload["level"] == "WARNING"
    assert payload["logger"] == "bookish.stores"
    assert payload["message"] == "rejected ToggleLike"
    assert "timestamp" in payload


def test_json_formatter_surfaces_known_extras():
    payload = json.loads(JSONFormatter().format(make_record(store="social", action="ToggleLike", other="x")))
    assert payload["store"] == "social"
    assert payload["action"] == "ToggleLike"
    assert "other" not in payload


def test_setup_logging_json(restore_root_logger):
    setup_logging("debug", "json")
    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0].formatter, JSONFormatter)


def test_setup_logging_text_replaces_previous_handlers(restore_root_logger):
    setup_logging("INFO", "json")
    setup_logging("WARNING", "text")
    root = logging.getLogger()
    assert root.level == logging.WARNING
    assert len(root.handlers) == 1
    assert not isinstance(root.handlers[0].formatter, JSONFormatter)
