"""Error handling for instructgen.

- ErrorCode: Standard error codes
- InstructgenError/SchemaParseError: Exceptions raised before rendering recovers
- JsonDict/JsonValue: JSON type aliases
"""

from .errors import ErrorCode, InstructgenError, SchemaParseError
from .types import JsonDict, JsonPrimitive, JsonValue

__all__ = [
    "ErrorCode", "InstructgenError", "SchemaParseError",
    "JsonDict", "JsonPrimitive", "JsonValue",
]
