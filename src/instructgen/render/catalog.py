"""Tool catalog rendering: one markdown entry per tool.

Entry layout::

     - search
    Description: Searches
    Parameters:
    - `query`: search text (string) (required)
    - `filters`:  (object) (optional)
      - Properties:
        - `site`: No description (string)

The schema walk stops at two levels (tool -> parameter -> nested field).
Deeper nesting is intentionally omitted from the text, whatever the depth
of the input schema.

Every failure is local to its entry: a tool that cannot be coerced or whose
schema cannot be decoded renders as its name plus SCHEMA_UNAVAILABLE.
"""

from __future__ import annotations

import json
from collections import Counter
from collections.abc import Iterable, Mapping
from typing import Any

import orjson

from instructgen.foundation.core import (
    ArrayOfObjectsParameter,
    NestedField,
    ObjectParameter,
    ParameterDetail,
    ScalarParameter,
    ToolLike,
    ToolSpec,
    UnknownParameter,
    coerce_tool,
    parse_parameters,
)
from instructgen.foundation.errors import SchemaParseError
from instructgen.runtime.observability import get_logger

from .preamble import SCHEMA_UNAVAILABLE

log = get_logger("instructgen.catalog")


def parse_schema(text: str | bytes, *, tool_name: str = "") -> Any:
    """Decode schema JSON text.

    orjson handles the common case. Text it refuses but that is still valid
    JSON (lone surrogate escapes such as ``"\\ud800"``) is decoded by the
    stdlib parser; NaN and Infinity literals are rejected by both.

    Raises:
        SchemaParseError: If the text is not valid JSON
    """
    try:
        return orjson.loads(text)
    except orjson.JSONDecodeError as e:
        reason = e.msg
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except ValueError as e:
        raise SchemaParseError(reason, tool_name=tool_name) from e


def render_tool(tool: ToolLike) -> str:
    """Render one catalog entry. Bad input only degrades this entry."""
    out: list[str] = []
    _write_entry(out, tool)
    return "".join(out)


def render_catalog(tools: Iterable[ToolLike]) -> str:
    """Render every tool in input order."""
    out: list[str] = []
    names = Counter(_write_entry(out, tool) for tool in tools)
    if dupes := sorted(n for n, c in names.items() if c > 1):
        log.warning("duplicate tool names", names=dupes)
    return "".join(out)


def _write_entry(out: list[str], tool: ToolLike) -> str:
    """Append one entry and return the name it was listed under."""
    try:
        spec = coerce_tool(tool)
    except (TypeError, ValueError) as e:
        name = _raw_name(tool)
        log.warning("invalid tool", tool=name, error=type(e).__name__)
        out.append(f" - {name}\n{SCHEMA_UNAVAILABLE}")
        return name
    _write_tool(out, spec)
    return spec.name


def _write_tool(out: list[str], tool: ToolSpec) -> None:
    out.append(f" - {tool.name}\n")
    try:
        schema = parse_schema(tool.schema_text, tool_name=tool.name)
    except SchemaParseError as e:
        log.warning("schema unavailable", tool=tool.name, code=str(e.code), reason=e.reason)
        out.append(SCHEMA_UNAVAILABLE)
        return

    if tool.description:
        out.append(f"Description: {tool.description}\n")

    if params := parse_parameters(schema):
        out.append("Parameters:\n")
        for param in params:
            _write_parameter(out, param)
        out.append("\n")


def _write_parameter(out: list[str], param: ParameterDetail) -> None:
    marker = "required" if param.required else "optional"
    out.append(f"- `{param.name}`: {param.description} ({param.type}) ({marker})\n")
    match param:
        case ObjectParameter(fields=fields):
            out.append("  - Properties:\n")
            _write_fields(out, fields)
        case ArrayOfObjectsParameter(fields=fields):
            out.append("  - Array items (objects) with properties:\n")
            _write_fields(out, fields)
        case ScalarParameter() | UnknownParameter():
            pass


def _write_fields(out: list[str], fields: tuple[NestedField, ...]) -> None:
    out.extend(f"    - `{f.name}`: {f.description or 'No description'} ({f.type})\n" for f in fields)


def _raw_name(tool: object) -> str:
    name = tool.get("name") if isinstance(tool, Mapping) else getattr(tool, "name", None)
    return "" if name is None else str(name)


def _reject_constant(literal: str) -> Any:
    raise ValueError(f"{literal} is not valid JSON")
