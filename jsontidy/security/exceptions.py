"""
Exception classes for jsontidy.

Normal validation failures are reported as data on result objects. The
exceptions here cross the boundary between the core and the host's JSON
primitives, and mark the rare hard faults the core cannot recover from.
"""

from typing import Optional


class JsonTidyError(Exception):
    """Base exception for jsontidy errors."""

    def __init__(
        self,
        message: str,
        position: Optional[int] = None,
        suggestions: Optional[list[str]] = None,
    ):
        self.message = message
        self.position = position
        self.suggestions = list(suggestions) if suggestions else []
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        parts = [self.message]
        if self.position is not None:
            parts[0] += f" at position {self.position}"
        if self.suggestions:
            parts.append("Suggestions:")
            parts.extend(f"  - {suggestion}" for suggestion in self.suggestions)
        return "\n".join(parts)


class ParseFailure(JsonTidyError):
    """Raised by the parse primitive when text is not valid JSON.

    ``position`` is the character offset reported by the underlying parser,
    or ``None`` when the parser only produced a prose message.
    """


class SerializationFault(JsonTidyError):
    """Raised when the serializer fails on an already-parsed value."""
