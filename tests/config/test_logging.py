"""Tests for structured logging configuration."""

import json
import logging

import pytest
import structlog

from gridecs import (
    Entity,
    LoggingSettings,
    SpatialGrid,
    SpatialIndex,
    World,
    configure_logging,
    get_logger,
)


def _reset() -> None:
    structlog.reset_defaults()
    root = logging.getLogger("gridecs")
    root.handlers.clear()
    root.setLevel(logging.NOTSET)
    root.propagate = True


@pytest.fixture(autouse=True)
def reset_logging():
    _reset()
    yield
    _reset()


def test_library_is_silent_without_configuration(capsys):
    """Debug events from World and SpatialIndex must not reach stdout or stderr."""
    world = World()
    index = SpatialIndex(SpatialGrid(cell_size=(1.0, 1.0), field_size=(3, 3)))

    index.place(world.next_entity(), (-5.0, 10.0))
    get_logger("gridecs.test").debug("hidden")

    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""


def test_json_output(capsys):
    configure_logging(LoggingSettings(level="DEBUG", json_output=True))

    get_logger("gridecs.test").debug("entity_created", entity=3)

    record = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
    assert record["event"] == "entity_created"
    assert record["entity"] == 3
    assert record["level"] == "debug"
    assert record["logger"] == "gridecs.test"
    assert "timestamp" in record


def test_library_events_follow_configuration(capsys):
    """Module-level loggers created at import time pick up a later configuration."""
    configure_logging(LoggingSettings(level="DEBUG", json_output=True))
    index = SpatialIndex(SpatialGrid(cell_size=(1.0, 1.0), field_size=(3, 3)))

    index.place(Entity(7), (-5.0, 0.0))

    record = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
    assert record["event"] == "entity_outside_field"
    assert record["entity"] == 7


def test_level_filters_debug(capsys):
    configure_logging(LoggingSettings(level="WARNING", json_output=True))

    get_logger("gridecs.test").debug("hidden")

    assert capsys.readouterr().out == ""


def test_configure_reads_environment(monkeypatch, capsys):
    monkeypatch.setenv("GRIDECS_LOG_LEVEL", "info")
    monkeypatch.setenv("GRIDECS_LOG_JSON_OUTPUT", "true")

    configure_logging()
    get_logger("gridecs.test").info("ready")

    assert json.loads(capsys.readouterr().out.strip())["event"] == "ready"
