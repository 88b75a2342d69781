"""Core data types: tool specifications and decoded parameter variants."""

from .models import ToolLike, ToolSpec, coerce_tool
from .parameters import (
    ANY_TYPE,
    ArrayOfObjectsParameter,
    NestedField,
    ObjectParameter,
    ParameterDetail,
    ScalarParameter,
    UnknownParameter,
    classify_parameter,
    parse_parameters,
)

__all__ = [
    "ToolLike", "ToolSpec", "coerce_tool",
    "ANY_TYPE", "ArrayOfObjectsParameter", "NestedField", "ObjectParameter",
    "ParameterDetail", "ScalarParameter", "UnknownParameter",
    "classify_parameter", "parse_parameters",
]
