"""Tests for the structlog/stdlib logging wiring."""

from __future__ import annotations

import logging

from cinebyarr.infrastructure.config import AppConfig
from cinebyarr.infrastructure.logging.setup import (
    _add_record_created_timestamp_utc,
    _drop_color_message,
    _LevelRangeFilter,
    build_logging_config,
)


def _record(level: int) -> logging.LogRecord:
    return logging.LogRecord("t", level, __file__, 1, "msg", None, None)


class TestBuildLoggingConfig:
    def test_level_applied_everywhere(self) -> None:
        cfg = build_logging_config(AppConfig(log_level="DEBUG"))
        assert cfg["root"]["level"] == "DEBUG"
        assert {c["level"] for c in cfg["loggers"].values()} == {"DEBUG"}

    def test_structlog_formatter_registered(self) -> None:
        cfg = build_logging_config(AppConfig())
        assert "structlog" in cfg["formatters"]
        assert cfg["handlers"]["default"]["formatter"] == "structlog"

    def test_base_config_not_mutated(self) -> None:
        build_logging_config(AppConfig(log_level="ERROR"))
        cfg = build_logging_config(AppConfig(log_level="INFO"))
        assert cfg["loggers"]["uvicorn"]["level"] == "INFO"


class TestProcessors:
    def test_color_message_dropped(self) -> None:
        event = {"event": "x", "color_message": "\x1b[32mx"}
        assert _drop_color_message(None, None, event) == {"event": "x"}

    def test_record_timestamp_is_utc(self) -> None:
        record = _record(logging.INFO)
        record.created = 0.0
        event = _add_record_created_timestamp_utc(None, None, {"_record": record})
        assert event["timestamp"] == "1970-01-01T00:00:00Z"


class TestLevelRangeFilter:
    def test_stdout_range(self) -> None:
        f = _LevelRangeFilter(max_level=logging.WARNING)
        assert f.filter(_record(logging.INFO))
        assert f.filter(_record(logging.WARNING))
        assert not f.filter(_record(logging.ERROR))

    def test_stderr_range(self) -> None:
        f = _LevelRangeFilter(min_level=logging.ERROR)
        assert not f.filter(_record(logging.WARNING))
        assert f.filter(_record(logging.CRITICAL))
