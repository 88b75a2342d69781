"""JSON type aliases shared across parsing, rendering and logging."""

from __future__ import annotations

from typing import Any, Union

# Any for recursive slots to keep Pydantic from resolving the recursion
JsonPrimitive = Union[str, int, float, bool, None]
JsonValue = Union[JsonPrimitive, list[Any], dict[str, Any]]
JsonDict = dict[str, Any]
