"""
Validator for jsontidy - decides whether text is valid, size-bounded JSON.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Optional, Union

import regex

from ..security.exceptions import ParseFailure
from ..security.limits import SizeCheck, SizeGuard
from ..utils.config import ProcessOptions, ResolvedOptions, TidyConfig
from .diagnostics import Diagnostic, ErrorCategory, ErrorDiagnostics
from .primitives import JsonPrimitives, ParsePrimitive, Stopwatch

OptionsLike = Union[ProcessOptions, Mapping[str, Any], None]

NO_CONTENT_MESSAGE = "No content provided"
EMPTY_CONTENT_MESSAGE = "Content is empty"

_WORD_PATTERN = regex.compile(r"\S+")


@dataclass(frozen=True)
class ValidationVerdict:
    """Outcome of running the validation checks on one text."""

    valid: bool
    diagnostic: Optional[Diagnostic] = None
    byte_size: int = 0
    size_ok: bool = True
    parse_duration_micros: float = 0.0
    value: Any = None

    def __post_init__(self) -> None:
        if self.valid == (self.diagnostic is not None):
            raise ValueError("diagnostic must be present exactly when invalid")

    @property
    def error(self) -> Optional[str]:
        """Raw error message, if any."""
        return self.diagnostic.message if self.diagnostic else None


@dataclass(frozen=True)
class ValidationStats:
    """Validation summary plus simple text metrics."""

    valid: bool
    byte_size: int
    size_ok: bool
    parse_duration_micros: float
    has_error: bool
    error_category: Optional[ErrorCategory]
    line_count: int
    character_count: int
    word_count: int


def _has_content(text: Any) -> bool:
    return isinstance(text, str) and text != ""


class Validator:
    """Runs the size, emptiness and syntax checks in order."""

    def __init__(
        self,
        config: Optional[TidyConfig] = None,
        primitives: Optional[ParsePrimitive] = None,
    ):
        self.config = config or TidyConfig()
        self.primitives = primitives or JsonPrimitives()
        self.size_guard = SizeGuard(self.config.max_size_bytes)
        self.logger = self.config.get_logger(__name__)

    def _resolve(self, options: OptionsLike) -> ResolvedOptions:
        resolved = ProcessOptions.coerce(options).resolve(self.config)
        for warning in resolved.warnings:
            self.logger.warning("Option replaced by default: %s", warning)
        return resolved

    def validate(self, text: Any, options: OptionsLike = None) -> ValidationVerdict:
        """Validate ``text``; the first failing check decides the verdict."""
        resolved = self._resolve(options)

        if not _has_content(text):
            return ValidationVerdict(
                valid=False,
                diagnostic=ErrorDiagnostics.from_empty_or_missing_input(
                    NO_CONTENT_MESSAGE
                ),
            )

        size = self.size_guard.check(text, resolved.max_size_bytes)
        if not size.within_limit:
            self.logger.debug(
                "Rejected %d bytes over limit %d", size.size_bytes, size.max_bytes
            )
            return ValidationVerdict(
                valid=False,
                diagnostic=ErrorDiagnostics.from_size_violation(
                    size.size_bytes, size.max_bytes
                ),
                byte_size=size.size_bytes,
                size_ok=False,
            )

        if not text.strip():
            return ValidationVerdict(
                valid=False,
                diagnostic=ErrorDiagnostics.from_empty_or_missing_input(
                    EMPTY_CONTENT_MESSAGE
                ),
                byte_size=size.size_bytes,
            )

        diagnostic, value, elapsed = self._parse(text)
        self.logger.debug(
            "Validated %d bytes in %.1fus (valid=%s)",
            size.size_bytes,
            elapsed,
            diagnostic is None,
        )
        return ValidationVerdict(
            valid=diagnostic is None,
            diagnostic=diagnostic,
            byte_size=size.size_bytes,
            parse_duration_micros=elapsed,
            value=value,
        )

    def _parse(self, text: str) -> tuple[Optional[Diagnostic], Any, float]:
        """Run the parse primitive, timing it whatever the outcome."""
        diagnostic: Optional[Diagnostic] = None
        value: Any = None
        with Stopwatch() as watch:
            try:
                value = self.primitives.parse(text)
            except ParseFailure as e:
                diagnostic = ErrorDiagnostics.from_parse_failure(
                    e.message, text, e.position
                )
            except RecursionError:
                self.logger.error("Parser recursion limit hit on %d chars", len(text))
                diagnostic = ErrorDiagnostics.from_unexpected_failure(
                    "Maximum nesting depth exceeded"
                )
        return diagnostic, value, watch.elapsed_micros

    def validate_size_only(
        self, text: Any, max_bytes: Optional[int] = None
    ) -> ValidationVerdict:
        """Check only the byte ceiling."""
        resolved = self._resolve(ProcessOptions(max_size_bytes=max_bytes))
        size: SizeCheck = self.size_guard.check(
            text if isinstance(text, str) else "", resolved.max_size_bytes
        )
        if size.within_limit:
            return ValidationVerdict(valid=True, byte_size=size.size_bytes)
        return ValidationVerdict(
            valid=False,
            diagnostic=ErrorDiagnostics.from_size_violation(
                size.size_bytes, size.max_bytes
            ),
            byte_size=size.size_bytes,
            size_ok=False,
        )

    def validate_syntax_only(self, text: Any) -> ValidationVerdict:
        """Check emptiness and syntax, skipping the byte ceiling."""
        if not _has_content(text):
            return ValidationVerdict(
                valid=False,
                diagnostic=ErrorDiagnostics.from_empty_or_missing_input(
                    NO_CONTENT_MESSAGE
                ),
            )

        byte_size = self.size_guard.check(text).size_bytes
        if not text.strip():
            return ValidationVerdict(
                valid=False,
                diagnostic=ErrorDiagnostics.from_empty_or_missing_input(
                    EMPTY_CONTENT_MESSAGE
                ),
                byte_size=byte_size,
            )

        diagnostic, value, elapsed = self._parse(text)
        return ValidationVerdict(
            valid=diagnostic is None,
            diagnostic=diagnostic,
            byte_size=byte_size,
            parse_duration_micros=elapsed,
            value=value,
        )

    def stats(self, text: Any, options: OptionsLike = None) -> ValidationStats:
        """Validate ``text`` and summarise it."""
        verdict = self.validate(text, options)
        content = text if isinstance(text, str) else ""
        return ValidationStats(
            valid=verdict.valid,
            byte_size=verdict.byte_size,
            size_ok=verdict.size_ok,
            parse_duration_micros=verdict.parse_duration_micros,
            has_error=verdict.diagnostic is not None,
            error_category=verdict.diagnostic.category if verdict.diagnostic else None,
            line_count=content.count("\n") + 1,
            character_count=len(content),
            word_count=len(_WORD_PATTERN.findall(content)),
        )


def validate(text: Any, options: OptionsLike = None) -> ValidationVerdict:
    """Validate ``text`` with the default configuration."""
    return Validator().validate(text, options)
