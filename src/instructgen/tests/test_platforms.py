"""Tests for platform addendum selection."""

from __future__ import annotations

import pytest

from instructgen.foundation.errors import ErrorCode, InstructgenError
from instructgen.render import CHATGPT_INSTRUCTIONS, GEMINI_INSTRUCTIONS, PlatformRegistry


@pytest.fixture
def registry() -> PlatformRegistry:
    return PlatformRegistry.default()


def test_default_order(registry: PlatformRegistry) -> None:
    assert list(registry) == ["gemini", "chatgpt"]
    assert len(registry) == 2


@pytest.mark.parametrize(
    ("host", "expected"),
    [
        ("gemini.google.com", [GEMINI_INSTRUCTIONS]),
        ("chatgpt.com", [CHATGPT_INSTRUCTIONS]),
        ("example.com", []),
        ("", []),
        ("GEMINI.google.com", []),
    ],
)
def test_select(registry: PlatformRegistry, host: str, expected: list[str]) -> None:
    assert registry.select(host) == expected


def test_both_tokens_match_in_registration_order(registry: PlatformRegistry) -> None:
    assert registry.select("chatgpt-gemini.test") == [GEMINI_INSTRUCTIONS, CHATGPT_INSTRUCTIONS]


def test_register_custom_platform(registry: PlatformRegistry) -> None:
    registry.register("perplexity", "PERPLEXITY NOTES\n")
    assert "perplexity" in registry
    assert registry["perplexity"] == "PERPLEXITY NOTES\n"
    assert registry.select("www.perplexity.ai") == ["PERPLEXITY NOTES\n"]


def test_register_duplicate_rejected(registry: PlatformRegistry) -> None:
    with pytest.raises(InstructgenError) as exc_info:
        registry.register("gemini", "other")
    assert exc_info.value.code == ErrorCode.INVALID_PLATFORM


def test_register_empty_token_rejected() -> None:
    with pytest.raises(InstructgenError):
        PlatformRegistry().register("", "anything")


def test_unregister(registry: PlatformRegistry) -> None:
    assert registry.unregister("gemini") is True
    assert registry.unregister("gemini") is False
    assert registry.select("gemini.google.com") == []


def test_empty_registry_selects_nothing() -> None:
    assert PlatformRegistry().select("gemini chatgpt") == []
