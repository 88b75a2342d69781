"""Structured logging for instruction rendering.

An entry is an event name plus key-value fields. A logger carries the fields
bound when it was created (its ``logger`` name, a tool, a host) and merges in
the fields given at the call site. Every logger writes through the one
renderer chosen by configure_logging(): console lines, JSON lines or nothing.
Loggers are usually created at import time, so the level and renderer are
looked up on each call rather than captured.

    >>> configure_logging(format="json", level="DEBUG")
    >>> log = get_logger("instructgen.catalog")
    >>> log.bind(tool="search").warning("schema unavailable", reason="unexpected character")
"""

from __future__ import annotations

import logging
import sys
import time
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Protocol, TextIO, runtime_checkable

import orjson

from instructgen.foundation.errors import JsonDict, JsonValue

if TYPE_CHECKING:
    from instructgen.foundation.config import InstructgenSettings


@dataclass(frozen=True, slots=True)
class LogEntry:
    """One emitted event with its merged fields."""

    timestamp: float
    level: str
    event: str
    fields: JsonDict

    def isoformat(self) -> str:
        return datetime.fromtimestamp(self.timestamp, tz=UTC).isoformat()

    def clock(self) -> str:
        """HH:MM:SS.mmm"""
        return datetime.fromtimestamp(self.timestamp, tz=UTC).strftime("%H:%M:%S.%f")[:-3]


@dataclass(frozen=True, slots=True)
class BoundLogger:
    """Logger whose bound fields are attached to every entry.

    Example:
        >>> log = get_logger("instructgen.renderer").bind(host="chatgpt.com")
        >>> log.debug("rendering instructions", tools=3)
        # => 10:30:45.120 [debug] rendering instructions host="chatgpt.com" logger="instructgen.renderer" tools=3
    """

    context: JsonDict = field(default_factory=dict)

    def bind(self, **fields: JsonValue) -> BoundLogger:
        """New logger with fields added to the bound context."""
        return BoundLogger({**self.context, **fields})

    def debug(self, event: str, **fields: JsonValue) -> None: self._emit(logging.DEBUG, event, fields)
    def info(self, event: str, **fields: JsonValue) -> None: self._emit(logging.INFO, event, fields)
    def warning(self, event: str, **fields: JsonValue) -> None: self._emit(logging.WARNING, event, fields)

    def _emit(self, level: int, event: str, fields: JsonDict) -> None:
        if level < _state["level"]:  # type: ignore[operator]
            return
        entry = LogEntry(time.time(), logging.getLevelName(level).lower(), event, {**self.context, **fields})
        _current_renderer().render(entry)


@runtime_checkable
class LogRenderer(Protocol):
    """Destination for log entries."""

    def render(self, entry: LogEntry) -> None: ...


@dataclass(slots=True)
class ConsoleRenderer:
    """``clock [level] event key=value ...`` lines; colored when writing to a TTY."""

    output: TextIO = field(default_factory=lambda: sys.stderr)
    colors: bool | None = None

    def __post_init__(self) -> None:
        if self.colors is None:
            self.colors = getattr(self.output, "isatty", lambda: False)()

    def render(self, entry: LogEntry) -> None:
        paint = _paint if self.colors else _plain
        parts = [paint("dim", entry.clock()), paint(entry.level, f"[{entry.level}]"), paint("bold", entry.event)]
        parts += [f"{paint('cyan', k)}={_console_value(v)}" for k, v in sorted(entry.fields.items())]
        print(" ".join(parts), file=self.output)


@dataclass(slots=True)
class JsonRenderer:
    """One JSON object per line: timestamp, level, event, then the fields."""

    output: TextIO = field(default_factory=lambda: sys.stdout)

    def render(self, entry: LogEntry) -> None:
        record = {"timestamp": entry.isoformat(), "level": entry.level, "event": entry.event, **entry.fields}
        print(orjson.dumps(record, option=orjson.OPT_NON_STR_KEYS, default=str).decode(), file=self.output)


@dataclass(slots=True)
class NoOpRenderer:
    """Discards every entry."""

    def render(self, entry: LogEntry) -> None:
        pass


_state: dict[str, object] = {"renderer": None, "level": logging.INFO}


def configure_logging(
    format: str = "console",  # noqa: A002
    level: str = "INFO",
    *,
    output: TextIO | None = None,
    colors: bool | None = None,
) -> LogRenderer:
    """Select the process-wide renderer and minimum level.

    Args:
        format: "console", "json" or "none"
        level: Standard level name; unknown names mean INFO
        output: Stream for console (default stderr) or json (default stdout) output
        colors: Force console colors on or off; None detects a TTY

    Raises:
        ValueError: If format is not one of the three names
    """
    match format:
        case "console":
            renderer: LogRenderer = ConsoleRenderer(output or sys.stderr, colors)
        case "json":
            renderer = JsonRenderer(output or sys.stdout)
        case "none":
            renderer = NoOpRenderer()
        case _:
            raise ValueError(f"Unknown log format {format!r}; expected 'console', 'json' or 'none'")
    _state.update(renderer=renderer, level=logging.getLevelNamesMapping().get(level.upper(), logging.INFO))
    return renderer


def configure_from_settings(settings: InstructgenSettings | None = None) -> LogRenderer:
    """Apply INSTRUCTGEN_LOG_* settings (and INSTRUCTGEN_DEBUG) to logging."""
    if settings is None:
        from instructgen.foundation.config import get_settings
        settings = get_settings()
    return configure_logging(format=settings.logging.format, level=settings.effective_log_level)


def get_logger(name: str | None = None, **context: JsonValue) -> BoundLogger:
    """Logger with context bound up front; name is bound as ``logger``."""
    return BoundLogger({**context, "logger": name} if name else context)


def reset_logging() -> None:
    """Back to a lazily created console renderer at INFO."""
    _state.update(renderer=None, level=logging.INFO)


def _current_renderer() -> LogRenderer:
    if (renderer := _state["renderer"]) is None:
        _state["renderer"] = renderer = ConsoleRenderer()
    return renderer  # type: ignore[return-value]


_ANSI = {"reset": "\033[0m", "bold": "\033[1m", "dim": "\033[2m", "cyan": "\033[36m",
         "debug": "\033[2m", "info": "\033[32m", "warning": "\033[33m", "error": "\033[31m"}


def _paint(style: str, text: str) -> str:
    return f"{_ANSI.get(style, '')}{text}{_ANSI['reset']}"


def _plain(style: str, text: str) -> str:
    return text


def _console_value(v: object) -> str:
    match v:
        case str():
            return f'"{v}"'
        case bool():
            return str(v).lower()
        case int() | float() | None:
            return "null" if v is None else str(v)
        case _:
            return orjson.dumps(v, option=orjson.OPT_NON_STR_KEYS, default=str).decode()
