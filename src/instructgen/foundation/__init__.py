"""Foundation - Core building blocks for instructgen.

Contains: tool and parameter models, error handling, config.
"""

from .config import InstructgenSettings, clear_settings_cache, get_settings
from .core import ToolSpec, classify_parameter, parse_parameters
from .errors import ErrorCode, InstructgenError, SchemaParseError

__all__ = [
    "InstructgenSettings", "clear_settings_cache", "get_settings",
    "ToolSpec", "classify_parameter", "parse_parameters",
    "ErrorCode", "InstructgenError", "SchemaParseError",
]
