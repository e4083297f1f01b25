"""Tests for structured logging setup."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
import structlog

from hyrule_heroes.core.logging import (
    bind_context,
    clear_context,
    configure_logging,
    get_logger,
)


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_json_output_to_stderr(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test JSON lines carry the app name and bound context."""
        configure_logging(level="INFO", json_format=True)
        bind_context(turn=4)
        try:
            get_logger("test").info("Level up", level=2)
        finally:
            clear_context()

        captured = capsys.readouterr()
        record = json.loads(captured.err.strip().splitlines()[-1])

        assert captured.out == ""
        assert record["event"] == "Level up"
        assert record["app"] == "hyrule_heroes"
        assert record["turn"] == 4
        assert record["level"] == 2

    def test_level_filters_debug(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test debug events are dropped at WARNING."""
        configure_logging(level="WARNING", json_format=True)

        get_logger("test").debug("Damage resolved", damage=25)

        assert capsys.readouterr().err == ""

    def test_log_file_receives_events(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test a log file replaces stderr as the destination."""
        log_file = tmp_path / "game.log"
        configure_logging(level="INFO", json_format=True, log_file=str(log_file))

        get_logger("test").info("Battle started", enemy_health=20)

        record = json.loads(log_file.read_text(encoding="utf-8").strip().splitlines()[-1])
        assert record["event"] == "Battle started"
        assert record["enemy_health"] == 20
        assert capsys.readouterr().err == ""

    def test_clear_context(self) -> None:
        """Test clearing removes bound variables."""
        bind_context(turn=1)
        clear_context()

        assert structlog.contextvars.get_contextvars() == {}
