"""instructgen - Tool-use protocol documents for chat-based AI agents.

Turns a list of available tools (name, JSON schema text, description) into
the markdown instructions that tell a language model how to request a
function call and which tools and parameters exist.

Quick Start:
    >>> from instructgen import generate_instructions
    >>>
    >>> tools = [{
    ...     "name": "search",
    ...     "schema": '{"type":"object","properties":{"query":{"type":"string",'
    ...               '"description":"search text"}},"required":["query"]}',
    ...     "description": "Searches",
    ... }]
    >>> doc = generate_instructions(tools, host="gemini.google.com")
    >>> "- `query`: search text (string) (required)" in doc
    True

Custom Platforms:
    >>> from instructgen import InstructionRenderer, PlatformRegistry
    >>> platforms = PlatformRegistry.default()
    >>> platforms.register("claude", "## Platform Notes: Claude\\n\\n")
    >>> renderer = InstructionRenderer(platforms)

Configuration (environment):
    >>> # INSTRUCTGEN_RENDER_HOST=chatgpt.com
    >>> # INSTRUCTGEN_RENDER_CUSTOM_INSTRUCTIONS="Answer in French."
    >>> # INSTRUCTGEN_RENDER_CUSTOM_INSTRUCTIONS_ENABLED=true
    >>> doc = InstructionRenderer.from_settings().render(tools)

Malformed schemas never abort a render: the affected tool gets a fallback
line and every other tool renders normally.
"""

from __future__ import annotations

__version__ = "0.1.0"

# Config
from .foundation.config import InstructgenSettings, clear_settings_cache, get_settings

# Core
from .foundation.core import (
    ArrayOfObjectsParameter,
    NestedField,
    ObjectParameter,
    ParameterDetail,
    ScalarParameter,
    ToolSpec,
    UnknownParameter,
    classify_parameter,
    parse_parameters,
)

# Errors
from .foundation.errors import ErrorCode, InstructgenError, SchemaParseError

# Rendering
from .render import (
    CLOSING_DELIMITER,
    PREAMBLE,
    TOOLS_UNAVAILABLE,
    ConfiguredRenderer,
    InstructionRenderer,
    PlatformRegistry,
    generate_instructions,
    parse_schema,
    render_tool,
)

# Logging
from .runtime.observability import configure_logging, get_logger

__all__ = [
    "__version__",
    # Config
    "InstructgenSettings", "clear_settings_cache", "get_settings",
    # Core
    "ArrayOfObjectsParameter", "NestedField", "ObjectParameter", "ParameterDetail",
    "ScalarParameter", "ToolSpec", "UnknownParameter", "classify_parameter", "parse_parameters",
    # Errors
    "ErrorCode", "InstructgenError", "SchemaParseError",
    # Rendering
    "CLOSING_DELIMITER", "PREAMBLE", "TOOLS_UNAVAILABLE",
    "ConfiguredRenderer", "InstructionRenderer", "PlatformRegistry",
    "generate_instructions", "parse_schema", "render_tool",
    # Logging
    "configure_logging", "get_logger",
]
