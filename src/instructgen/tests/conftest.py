"""Shared fixtures for instructgen tests."""

from __future__ import annotations

import io
import os

import pytest

from instructgen.foundation.config import clear_settings_cache
from instructgen.runtime.observability import configure_logging, reset_logging


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch: pytest.MonkeyPatch) -> object:
    """Drop INSTRUCTGEN_* variables, silence logs, and reset cached settings."""
    for key in [k for k in os.environ if k.startswith("INSTRUCTGEN_")]:
        monkeypatch.delenv(key)
    clear_settings_cache()
    configure_logging(format="none")
    yield
    clear_settings_cache()
    reset_logging()


@pytest.fixture
def captured_logs() -> io.StringIO:
    """Route JSON log lines at DEBUG level into a buffer."""
    buf = io.StringIO()
    configure_logging(format="json", level="DEBUG", output=buf)
    return buf


@pytest.fixture
def search_tool() -> dict[str, str]:
    return {
        "name": "search",
        "schema": '{"type":"object","properties":{"query":{"type":"string","description":"search text"}},'
                  '"required":["query"]}',
        "description": "Searches",
    }


@pytest.fixture
def broken_tool() -> dict[str, str]:
    return {"name": "broken", "schema": "{not json", "description": "Never shown"}


@pytest.fixture
def nested_schema() -> str:
    """Object parameter nesting three levels deep plus an array of objects."""
    return (
        '{"type":"object","properties":{'
        '"filters":{"type":"object","description":"Result filters","properties":{'
        '"site":{"type":"string","description":"Domain"},'
        '"date":{"type":"object","properties":{"from":{"type":"string","description":"DEEP_MARKER"}}}}},'
        '"rows":{"type":"array","items":{"type":"object","properties":{'
        '"id":{"type":"integer"},"label":{"description":"Row label"}}}}'
        '},"required":["rows"]}'
    )
