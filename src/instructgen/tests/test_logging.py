"""Tests for structured logging."""

from __future__ import annotations

import io

import orjson
import pytest

from instructgen.foundation.config import InstructgenSettings
from instructgen.runtime.observability import (
    ConsoleRenderer,
    JsonRenderer,
    NoOpRenderer,
    configure_from_settings,
    configure_logging,
    get_logger,
)


def _lines(buf: io.StringIO) -> list[dict[str, object]]:
    return [orjson.loads(line) for line in buf.getvalue().splitlines()]


def test_json_output_includes_context(captured_logs: io.StringIO) -> None:
    log = get_logger("test", component="catalog").bind(tool="search")
    log.info("rendered", chars=10)
    (entry,) = _lines(captured_logs)
    assert entry["event"] == "rendered"
    assert entry["level"] == "info"
    assert entry["logger"] == "test"
    assert entry["component"] == "catalog"
    assert entry["tool"] == "search"
    assert entry["chars"] == 10
    assert "timestamp" in entry


def test_level_filtering() -> None:
    buf = io.StringIO()
    configure_logging(format="json", level="WARNING", output=buf)
    log = get_logger()
    log.info("hidden")
    log.warning("shown")
    assert [e["event"] for e in _lines(buf)] == ["shown"]


def test_loggers_follow_reconfiguration() -> None:
    """Module-level loggers created before configure_logging pick up the new level."""
    log = get_logger("early")
    buf = io.StringIO()
    configure_logging(format="json", level="DEBUG", output=buf)
    log.debug("visible")
    assert _lines(buf)[0]["event"] == "visible"


def test_bind_leaves_original_untouched(captured_logs: io.StringIO) -> None:
    base = get_logger("catalog")
    base.bind(tool="search").info("bound")
    base.info("unbound")
    bound, unbound = _lines(captured_logs)
    assert bound["tool"] == "search"
    assert "tool" not in unbound


def test_call_site_fields_override_bound(captured_logs: io.StringIO) -> None:
    get_logger(tool="a").warning("x", tool="b")
    (entry,) = _lines(captured_logs)
    assert entry["tool"] == "b" and entry["level"] == "warning"


def test_console_renderer_plain() -> None:
    buf = io.StringIO()
    configure_logging(format="console", level="INFO", output=buf, colors=False)
    get_logger().info("schema unavailable", tool="broken")
    line = buf.getvalue().strip()
    assert "[info] schema unavailable" in line
    assert 'tool="broken"' in line
    assert "\033[" not in line


def test_configure_returns_renderer() -> None:
    assert isinstance(configure_logging(format="json"), JsonRenderer)
    assert isinstance(configure_logging(format="console", output=io.StringIO()), ConsoleRenderer)
    assert isinstance(configure_logging(format="none"), NoOpRenderer)


def test_unknown_format_rejected() -> None:
    with pytest.raises(ValueError):
        configure_logging(format="xml")


def test_configure_from_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("INSTRUCTGEN_LOG_FORMAT", "none")
    assert isinstance(configure_from_settings(InstructgenSettings()), NoOpRenderer)
