"""
Diagnostics for jsontidy.

This module turns raw parser failures, empty input and size violations into
structured :class:`Diagnostic` records with a position, a line/column pair
and a remediation suggestion. Everything here is pure: no I/O, no logging.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

import regex

from ..security.limits import byte_length, format_bytes

# Fallback for primitives that only report prose, e.g. "... at position 12"
POSITION_PATTERN = regex.compile(r"position\s+(\d+)", regex.IGNORECASE)

GENERIC_SYNTAX_SUGGESTION = (
    "Check JSON syntax for common errors like missing commas or brackets"
)
EMPTY_INPUT_SUGGESTION = "Ensure the JSON structure is valid and complete"
SIZE_SUGGESTION = "Reduce the size or split the input into smaller parts"


class ErrorCategory(Enum):
    """Categories of validation and formatting failures."""

    SYNTAX = "syntax"
    EMPTY = "empty"
    SIZE_EXCEEDED = "size_exceeded"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class Position:
    """Position in source text (line and column, both 1-based)."""

    line: int
    column: int


@dataclass(frozen=True)
class Diagnostic:
    """Structured description of why validation or formatting failed."""

    message: str
    category: ErrorCategory = ErrorCategory.UNKNOWN
    byte_position: int = 0
    line: Optional[int] = None
    column: Optional[int] = None
    suggestion: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.message:
            object.__setattr__(self, "message", "Unknown error")
        if self.byte_position < 0:
            object.__setattr__(self, "byte_position", 0)
        if (self.line is None) != (self.column is None):
            raise ValueError("line and column must be set together")

    @property
    def position(self) -> Optional[Position]:
        """Line/column pair, when known."""
        if self.line is None or self.column is None:
            return None
        return Position(self.line, self.column)

    @property
    def is_syntax_error(self) -> bool:
        return self.category is ErrorCategory.SYNTAX

    @property
    def is_empty_error(self) -> bool:
        return self.category is ErrorCategory.EMPTY

    @property
    def is_size_error(self) -> bool:
        return self.category is ErrorCategory.SIZE_EXCEEDED

    def formatted_message(self) -> str:
        """Message with the location appended when one is known."""
        if self.line is not None and self.column is not None:
            return f"{self.message} (line {self.line}, column {self.column})"
        if self.byte_position > 0:
            return f"{self.message} (position {self.byte_position})"
        return self.message

    def to_dict(self) -> dict[str, Any]:
        """Details record suitable for display or JSON encoding."""
        return {
            "message": self.message,
            "category": self.category.value,
            "byte_position": self.byte_position,
            "line": self.line,
            "column": self.column,
            "suggestion": self.suggestion,
            "formatted_message": self.formatted_message(),
        }


class SuggestionEngine:
    """Picks a remediation hint by matching the raw parser message."""

    # (lowercase substring, suggestion); first match wins
    RULES: tuple[tuple[str, str], ...] = (
        ("unexpected token", "Check for missing commas, brackets, or quotes"),
        ("unexpected end", "Check for missing closing brackets or quotes"),
        ("unexpected string", "Check for unescaped quotes or special characters"),
    )

    @classmethod
    def suggest(cls, raw_message: str) -> str:
        """Return the suggestion for a syntax failure message."""
        lowered = (raw_message or "").lower()
        for needle, suggestion in cls.RULES:
            if needle in lowered:
                return suggestion
        return GENERIC_SYNTAX_SUGGESTION


def extract_position(raw_message: str) -> Optional[int]:
    """Pull a ``position N`` offset out of a prose parser message."""
    match = POSITION_PATTERN.search(raw_message or "")
    if match is None:
        return None
    return int(match.group(1))


def line_column(text: str, offset: int) -> Position:
    """
    Compute the 1-based line and column of ``offset`` in ``text``.

    Args:
        text: Source text
        offset: Character offset; clamped to the length of ``text``

    Returns:
        Position of the character at ``offset``
    """
    line = 1
    column = 1
    for char in text[: max(0, min(offset, len(text)))]:
        if char == "\n":
            line += 1
            column = 1
        else:
            column += 1
    return Position(line, column)


class ErrorDiagnostics:
    """Factory for :class:`Diagnostic` records."""

    @staticmethod
    def from_parse_failure(
        raw_message: str, source_text: str, position: Optional[int] = None
    ) -> Diagnostic:
        """Build a syntax diagnostic from a parser failure.

        An explicit ``position`` from the primitive takes precedence over
        anything recovered from the message text.
        """
        offset = position if position is not None else extract_position(raw_message)
        offset = max(0, offset or 0)
        source_text = source_text or ""

        line: Optional[int] = None
        column: Optional[int] = None
        byte_position = offset
        if offset > 0 and source_text:
            found = line_column(source_text, offset)
            line, column = found.line, found.column
            byte_position = byte_length(source_text[:offset])

        return Diagnostic(
            message=raw_message or "Invalid JSON",
            category=ErrorCategory.SYNTAX,
            byte_position=byte_position,
            line=line,
            column=column,
            suggestion=SuggestionEngine.suggest(raw_message),
        )

    @staticmethod
    def from_empty_or_missing_input(message: str) -> Diagnostic:
        """Diagnostic for missing or whitespace-only input."""
        return Diagnostic(
            message=message,
            category=ErrorCategory.EMPTY,
            suggestion=EMPTY_INPUT_SUGGESTION,
        )

    @staticmethod
    def from_size_violation(actual_bytes: int, max_bytes: int) -> Diagnostic:
        """Diagnostic for input over the byte ceiling."""
        return Diagnostic(
            message=(
                f"Content size ({format_bytes(actual_bytes)}) exceeds limit "
                f"({format_bytes(max_bytes)})"
            ),
            category=ErrorCategory.SIZE_EXCEEDED,
            suggestion=SIZE_SUGGESTION,
        )

    @staticmethod
    def from_unexpected_failure(message: str) -> Diagnostic:
        """Diagnostic for a primitive failure of unexpected shape."""
        return Diagnostic(message=message, category=ErrorCategory.UNKNOWN)
