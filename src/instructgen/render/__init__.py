"""Instruction document rendering: preamble, platform addenda, tool catalog."""

from .catalog import parse_schema, render_catalog, render_tool
from .platforms import CHATGPT_INSTRUCTIONS, DEFAULT_PLATFORMS, GEMINI_INSTRUCTIONS, PlatformRegistry
from .preamble import CLOSING_DELIMITER, PREAMBLE, SCHEMA_UNAVAILABLE, TOOLS_HEADER, TOOLS_UNAVAILABLE
from .renderer import ConfiguredRenderer, InstructionRenderer, custom_instructions_block, generate_instructions

__all__ = [
    "parse_schema", "render_catalog", "render_tool",
    "CHATGPT_INSTRUCTIONS", "DEFAULT_PLATFORMS", "GEMINI_INSTRUCTIONS", "PlatformRegistry",
    "CLOSING_DELIMITER", "PREAMBLE", "SCHEMA_UNAVAILABLE", "TOOLS_HEADER", "TOOLS_UNAVAILABLE",
    "ConfiguredRenderer", "InstructionRenderer", "custom_instructions_block", "generate_instructions",
]
