"""Error codes and exceptions raised while preparing instruction documents.

Rendering itself never raises: schema problems are caught per tool and
turned into fallback text. These types exist so the failure is still
classified and logged where it happens.
"""

from __future__ import annotations

from enum import StrEnum


class ErrorCode(StrEnum):
    """Machine-readable classification of instruction rendering failures."""
    PARSE_ERROR = "PARSE_ERROR"
    INVALID_PLATFORM = "INVALID_PLATFORM"
    UNKNOWN = "UNKNOWN"


class InstructgenError(Exception):
    """Base exception carrying an ErrorCode."""

    code: ErrorCode = ErrorCode.UNKNOWN

    def __init__(self, message: str, *, code: ErrorCode | None = None) -> None:
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class SchemaParseError(InstructgenError):
    """A tool's schema text is not valid JSON.

    Attributes:
        tool_name: Tool whose schema failed, empty when parsed standalone
        reason: Decoder message
    """

    code = ErrorCode.PARSE_ERROR

    def __init__(self, reason: str, *, tool_name: str = "") -> None:
        self.tool_name, self.reason = tool_name, reason
        prefix = f"Schema for '{tool_name}'" if tool_name else "Schema"
        super().__init__(f"{prefix} is not valid JSON: {reason}")
