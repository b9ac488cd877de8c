"""Unit tests for configure_logging."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator

import pytest
import structlog

from active_row.core import engine as engine_module
from active_row.core.connection import ConnectionManager
from active_row.core.engine import Engine
from active_row.core.logging import configure_logging
from active_row.sql import BuiltQuery


@pytest.fixture(autouse=True)
def _restore_logging(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Give the engine an uncached logger and undo global configuration."""
    root = logging.getLogger()
    saved_handlers = root.handlers[:]
    saved_level = root.level
    monkeypatch.setattr(engine_module, "logger", structlog.get_logger(engine_module.__name__))
    yield
    structlog.reset_defaults()
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)


def _insert(provider: ConnectionManager) -> None:
    Engine(provider).execute(
        BuiltQuery("INSERT INTO Contact (firstName) VALUES (?)", ("Alice",))
    )


def _lines(capsys: pytest.CaptureFixture[str]) -> list[str]:
    return [line for line in capsys.readouterr().out.splitlines() if line.strip()]


class TestConfigureLogging:
    def test_json_output(
        self, provider: ConnectionManager, capsys: pytest.CaptureFixture[str]
    ) -> None:
        configure_logging("INFO", json_output=True)
        _insert(provider)

        entries = [json.loads(line) for line in _lines(capsys)]
        executed = [e for e in entries if e["event"] == "executed_query"]
        assert len(executed) == 1
        assert executed[0]["sql"] == "INSERT INTO Contact (firstName) VALUES (?)"
        assert executed[0]["rowcount"] == 1
        assert executed[0]["level"] == "info"
        assert executed[0]["logger"] == "active_row.core.engine"
        assert "timestamp" in executed[0]

    def test_console_output(
        self, provider: ConnectionManager, capsys: pytest.CaptureFixture[str]
    ) -> None:
        configure_logging("INFO")
        _insert(provider)

        lines = [line for line in _lines(capsys) if "executed_query" in line]
        assert len(lines) == 1
        assert not lines[0].startswith("{")
        assert "rowcount=1" in lines[0]

    def test_level_filters_events(
        self, provider: ConnectionManager, capsys: pytest.CaptureFixture[str]
    ) -> None:
        configure_logging("warning", json_output=True)
        _insert(provider)

        assert _lines(capsys) == []

    def test_debug_level_includes_statement_start(
        self, provider: ConnectionManager, capsys: pytest.CaptureFixture[str]
    ) -> None:
        configure_logging("DEBUG", json_output=True)
        _insert(provider)

        events = [json.loads(line)["event"] for line in _lines(capsys)]
        assert events == ["executing_query", "executed_query"]
