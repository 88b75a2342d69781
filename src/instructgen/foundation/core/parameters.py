"""Parameter variants decoded from a parsed tool schema.

Each entry of a schema's ``properties`` is classified exactly once into one
of four variants, which the catalog renderer then matches on:

- ObjectParameter: ``type == "object"`` with its own ``properties``
- ArrayOfObjectsParameter: ``type == "array"`` whose ``items`` declare
  ``type == "object"`` and ``properties``
- UnknownParameter: no ``type`` at all (or a detail that is not an object)
- ScalarParameter: everything else

Decoding goes exactly two levels deep (tool -> parameter -> nested field).
Anything nested below a nested field is dropped here, so the renderer
cannot recurse further even if the input schema does.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TypeAlias

import orjson

from ..errors import JsonDict

ANY_TYPE = "any"


@dataclass(frozen=True, slots=True)
class NestedField:
    """One field of an object parameter or of array item objects."""

    name: str
    description: str
    type: str

    @classmethod
    def from_detail(cls, name: str, detail: Any) -> NestedField:
        d = _as_dict(detail)
        return cls(name, _label(d.get("description"), ""), _label(d.get("type"), ANY_TYPE))


@dataclass(frozen=True, slots=True)
class ScalarParameter:
    name: str
    description: str
    type: str
    required: bool


@dataclass(frozen=True, slots=True)
class UnknownParameter:
    name: str
    description: str
    required: bool

    @property
    def type(self) -> str:
        return ANY_TYPE


@dataclass(frozen=True, slots=True)
class ObjectParameter:
    name: str
    description: str
    required: bool
    fields: tuple[NestedField, ...]

    @property
    def type(self) -> str:
        return "object"


@dataclass(frozen=True, slots=True)
class ArrayOfObjectsParameter:
    name: str
    description: str
    required: bool
    fields: tuple[NestedField, ...]

    @property
    def type(self) -> str:
        return "array"


ParameterDetail: TypeAlias = ScalarParameter | UnknownParameter | ObjectParameter | ArrayOfObjectsParameter


def classify_parameter(name: str, detail: Any, *, required: bool = False) -> ParameterDetail:
    """Decide the variant of a single schema property.

    Example:
        >>> classify_parameter("q", {"type": "string"}, required=True)
        ScalarParameter(name='q', description='', type='string', required=True)
        >>> classify_parameter("q", {})
        UnknownParameter(name='q', description='', required=False)
    """
    d = _as_dict(detail)
    description, kind = _label(d.get("description"), ""), d.get("type")

    if kind == "object" and isinstance(props := d.get("properties"), dict):
        return ObjectParameter(name, description, required, _fields(props))

    items = d.get("items")
    if (kind == "array" and isinstance(items, dict) and items.get("type") == "object"
            and isinstance(props := items.get("properties"), dict)):
        return ArrayOfObjectsParameter(name, description, required, _fields(props))

    if not kind:
        return UnknownParameter(name, description, required)
    return ScalarParameter(name, description, _label(kind, ANY_TYPE), required)


def parse_parameters(schema: Any) -> tuple[ParameterDetail, ...]:
    """Classify every property of a parsed schema, in declaration order.

    Returns an empty tuple when the schema is not an object or has no
    non-empty ``properties`` object. ``required`` counts only when it is a
    list; any other value is treated as no required parameters.
    """
    if not isinstance(schema, dict) or not isinstance(props := schema.get("properties"), dict):
        return ()
    required = schema.get("required")
    required = required if isinstance(required, list) else []
    return tuple(classify_parameter(n, d, required=n in required) for n, d in props.items())


def _fields(props: JsonDict) -> tuple[NestedField, ...]:
    return tuple(NestedField.from_detail(n, d) for n, d in props.items())


def _as_dict(detail: Any) -> JsonDict:
    return detail if isinstance(detail, dict) else {}


def _label(value: Any, default: str) -> str:
    """Render a schema value as display text, falling back to default when empty."""
    match value:
        case None | "" | False:
            return default
        case str():
            return value
        case bool():
            return "true"
        case int() | float():
            return str(value) if value else default
        case list():
            return ",".join(v if isinstance(v, str) else orjson.dumps(v).decode() for v in value) or default
        case _:
            return orjson.dumps(value, option=orjson.OPT_NON_STR_KEYS).decode()
