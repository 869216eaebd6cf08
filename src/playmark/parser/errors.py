"""
playmark.parser.errors - Parser error values.

Malformed input is reported through these values rather than raised.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class Severity(Enum):
    """Severity level for parser errors."""

    CRITICAL = "critical"
    WARNING = "warning"
    INFO = "info"


class ErrorType:
    """Error type identifiers emitted by the parser."""

    INVALID_ANNOTATION = "INVALID_ANNOTATION"
    INVALID_SYNTAX = "INVALID_SYNTAX"
    UNCLOSED_CODE_BLOCK = "UnclosedCodeBlock"
    FLAG_SYNTAX_ERROR = "FlagSyntaxError"


@dataclass
class ParserError:
    """
    A single problem found while parsing.

    Attributes:
        type: Error type identifier (see ErrorType)
        message: Human-readable description
        line: 1-indexed line the error refers to, if known
        severity: Severity level
        context: Optional source text the error was raised for
    """

    type: str
    message: str
    line: Optional[int] = None
    severity: Severity = Severity.CRITICAL
    context: Optional[str] = None

    @property
    def is_critical(self) -> bool:
        return self.severity is Severity.CRITICAL

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the wire shape, omitting absent optional fields."""
        data: dict[str, Any] = {"type": self.type, "message": self.message}
        if self.line is not None:
            data["line"] = self.line
        data["severity"] = self.severity.value
        if self.context is not None:
            data["context"] = self.context
        return data

    def __str__(self) -> str:
        prefix = {
            Severity.CRITICAL: "❌ CRITICAL",
            Severity.WARNING: "⚠️ WARNING",
            Severity.INFO: "ℹ️ INFO",
        }.get(self.severity, "?")
        location = f"line {self.line}" if self.line is not None else "unknown line"
        return f"{prefix} [{self.type}] {location}\n   {self.message}"


def create_error(
    type: str,
    message: str,
    line: Optional[int] = None,
    severity: Severity = Severity.CRITICAL,
    context: Optional[str] = None,
) -> ParserError:
    """
    Create a parser error.

    Args:
        type: Error type identifier
        message: Human-readable message
        line: Optional line number (1-indexed)
        severity: Severity level, critical unless stated otherwise
        context: Optional additional context

    Returns:
        ParserError value
    """
    return ParserError(type=type, message=message, line=line, severity=severity, context=context)
