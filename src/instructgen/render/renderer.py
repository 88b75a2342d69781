"""Instruction document assembly.

Document layout for a non-empty tool list::

    PREAMBLE
    platform fragments selected by host (zero or more)
    ## Tools available
    catalog entries, in input order
    <custom_instructions> block (when enabled and non-blank)
    CLOSING_DELIMITER

An empty or missing tool list collapses the whole document to
TOOLS_UNAVAILABLE.
"""

from __future__ import annotations

from collections.abc import Iterable

from instructgen.foundation.config import InstructgenSettings, get_settings
from instructgen.foundation.core import ToolLike
from instructgen.runtime.observability import get_logger

from .catalog import render_catalog
from .platforms import PlatformRegistry
from .preamble import (
    CLOSING_DELIMITER,
    CUSTOM_INSTRUCTIONS_CLOSE,
    CUSTOM_INSTRUCTIONS_OPEN,
    PREAMBLE,
    TOOLS_HEADER,
    TOOLS_UNAVAILABLE,
)

log = get_logger("instructgen.renderer")


class InstructionRenderer:
    """Renders the tool-use protocol document for an agent.

    Stateless apart from the platform registry it was built with, which is
    only read while rendering.

    Example:
        >>> renderer = InstructionRenderer()
        >>> doc = renderer.render(
        ...     [{"name": "search", "schema": '{"properties": {"q": {"type": "string"}}}'}],
        ...     host="chatgpt.com",
        ... )
        >>> doc.startswith("### System Prompt: Tool Invocation Protocol")
        True
    """

    __slots__ = ("platforms",)

    def __init__(self, platforms: PlatformRegistry | None = None) -> None:
        self.platforms = platforms if platforms is not None else PlatformRegistry.default()

    @classmethod
    def from_settings(cls, settings: InstructgenSettings | None = None,
                      platforms: PlatformRegistry | None = None) -> ConfiguredRenderer:
        """Renderer that takes host and custom instructions from configuration."""
        return ConfiguredRenderer(cls(platforms), settings if settings is not None else get_settings())

    def render(
        self,
        tools: Iterable[ToolLike] | None,
        custom_instructions: str | None = None,
        custom_instructions_enabled: bool = False,
        *,
        host: str = "",
    ) -> str:
        """Render the full instruction document.

        Args:
            tools: Available tools, rendered in this order
            custom_instructions: User-authored text appended near the end
            custom_instructions_enabled: Gate for custom_instructions
            host: Host identifier used to select platform fragments

        Never raises. A tool that cannot be rendered is listed by name with
        SCHEMA_UNAVAILABLE in place of its details.
        """
        items = list(tools or ())
        if not items:
            log.debug("no tools available")
            return TOOLS_UNAVAILABLE

        log.debug("rendering instructions", tools=len(items), host=host)
        out = [PREAMBLE, *self.platforms.select(host), TOOLS_HEADER, render_catalog(items)]
        if block := custom_instructions_block(custom_instructions, custom_instructions_enabled):
            out.append(block)
        out.append(CLOSING_DELIMITER)

        doc = "".join(out)
        log.debug("rendered instructions", chars=len(doc))
        return doc


class ConfiguredRenderer:
    """InstructionRenderer bound to settings for host and custom instructions."""

    __slots__ = ("renderer", "settings")

    def __init__(self, renderer: InstructionRenderer, settings: InstructgenSettings) -> None:
        self.renderer, self.settings = renderer, settings

    def render(self, tools: Iterable[ToolLike] | None) -> str:
        r = self.settings.render
        return self.renderer.render(tools, r.custom_instructions, r.custom_instructions_enabled, host=r.host)


def custom_instructions_block(text: str | None, enabled: bool) -> str:
    """Delimited custom instructions, or "" when disabled or blank."""
    if not enabled or not text or not (stripped := text.strip()):
        return ""
    return f"{CUSTOM_INSTRUCTIONS_OPEN}{stripped}{CUSTOM_INSTRUCTIONS_CLOSE}"


def generate_instructions(
    tools: Iterable[ToolLike] | None,
    custom_instructions: str | None = None,
    custom_instructions_enabled: bool = False,
    *,
    host: str = "",
    platforms: PlatformRegistry | None = None,
) -> str:
    """Render the instruction document with a one-off renderer.

    Example:
        >>> generate_instructions([])
        '# Tools unavailable\\n\\nConnect to the MCP server then retry.'
    """
    return InstructionRenderer(platforms).render(
        tools, custom_instructions, custom_instructions_enabled, host=host)
