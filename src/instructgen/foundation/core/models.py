"""Tool input model.

A ToolSpec is what the caller hands the renderer for each available tool:
its name, its parameter schema as JSON text, and a free-text description.
The schema text is kept verbatim because it may be malformed; parsing is
deferred to rendering, where a bad schema only affects its own entry.

Loosely typed input is coerced rather than rejected: parsed schemas are
serialized back to JSON text, and scalar names and descriptions are
stringified. Only a missing or empty name and a missing schema fail.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Annotated, Any

import orjson
from pydantic import BaseModel, ConfigDict, Field, field_validator


class ToolSpec(BaseModel):
    """A callable tool exposed to the agent.

    Attributes:
        name: Unique identifier shown in the catalog
        schema_text: Serialized JSON schema of the parameters (alias "schema")
        description: What the tool does, may be empty

    Example:
        >>> ToolSpec(name="search", schema='{"properties": {}}', description="Searches")
        ToolSpec(name='search', schema_text='{"properties": {}}', description='Searches')
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        extra="ignore",
        json_schema_extra={
            "title": "Tool",
            "examples": [{
                "name": "search",
                "schema": '{"type":"object","properties":{"query":{"type":"string"}},"required":["query"]}',
                "description": "Searches",
            }],
        },
    )

    name: Annotated[str, Field(min_length=1, description="Tool name, unique within a catalog")]
    schema_text: str = Field(..., alias="schema", description="Parameter schema as JSON text")
    description: str = Field(default="", description="Free-text description")

    @field_validator("name", mode="before")
    @classmethod
    def _stringify_name(cls, v: Any) -> Any:
        return v if v is None or isinstance(v, str) else str(v)

    @field_validator("schema_text", mode="before")
    @classmethod
    def _serialize_schema(cls, v: Any) -> Any:
        """Keep text untouched, decode bytes, serialize anything else as JSON."""
        match v:
            case str():
                return v
            case bytes():
                return v.decode("utf-8", errors="replace")
            case _:
                return orjson.dumps(v, option=orjson.OPT_NON_STR_KEYS, default=str).decode()

    @field_validator("description", mode="before")
    @classmethod
    def _stringify_description(cls, v: Any) -> Any:
        match v:
            case None | False:
                return ""
            case True:
                return "true"
            case str():
                return v
            case _:
                return str(v)


ToolLike = ToolSpec | Mapping[str, Any]


def coerce_tool(tool: ToolLike) -> ToolSpec:
    """Return tool as a ToolSpec, validating plain mappings.

    Raises:
        pydantic.ValidationError: If a mapping lacks a name or schema
        TypeError: If tool is neither a ToolSpec nor a mapping
    """
    return tool if isinstance(tool, ToolSpec) else ToolSpec.model_validate(dict(tool))
