"""
Formatter for jsontidy - pretty-prints and minifies JSON.

Both operations accept either raw text (parsed first) or a value that has
already been parsed by the validator, so the processor never parses twice.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Optional, Union

from ..security.exceptions import ParseFailure, SerializationFault
from ..security.limits import byte_length
from ..utils.config import ProcessOptions, ResolvedOptions, TidyConfig
from .diagnostics import Diagnostic, ErrorDiagnostics
from .primitives import JsonPrimitives, ParsePrimitive, Stopwatch
from .validator import EMPTY_CONTENT_MESSAGE, NO_CONTENT_MESSAGE

OptionsLike = Union[ProcessOptions, Mapping[str, Any], None]


@dataclass(frozen=True)
class FormatResult:
    """Outcome of one pretty-print or minify operation."""

    succeeded: bool
    text: str = ""
    diagnostic: Optional[Diagnostic] = None
    duration_micros: float = 0.0

    @property
    def error(self) -> Optional[str]:
        return self.diagnostic.message if self.diagnostic else None


@dataclass(frozen=True)
class FormattingStats:
    """Sizes and timings of formatting and minifying one text."""

    original_bytes: int
    formatted_bytes: int
    minified_bytes: int
    format_duration_micros: float
    minify_duration_micros: float
    compression_ratio_percent: float
    can_format: bool
    can_minify: bool


class Formatter:
    """Serializes JSON values in pretty or compact form."""

    def __init__(
        self,
        config: Optional[TidyConfig] = None,
        primitives: Optional[ParsePrimitive] = None,
    ):
        self.config = config or TidyConfig()
        self.primitives = primitives or JsonPrimitives()
        self.logger = self.config.get_logger(__name__)

    @property
    def default_indentation(self) -> int:
        return self.config.default_indentation

    @property
    def max_indentation(self) -> int:
        return self.config.max_indentation

    def resolve_options(self, options: OptionsLike = None) -> ResolvedOptions:
        """Resolve per-call options, logging any value replaced by a default."""
        resolved = ProcessOptions.coerce(options).resolve(self.config)
        for warning in resolved.warnings:
            self.logger.warning("Option replaced by default: %s", warning)
        return resolved

    def format(self, text: Any, options: OptionsLike = None) -> FormatResult:
        """Parse ``text`` and pretty-print it."""
        resolved = self.resolve_options(options)
        return self._run(text, resolved.indent)

    def format_value(self, value: Any, options: OptionsLike = None) -> FormatResult:
        """Pretty-print an already parsed value."""
        resolved = self.resolve_options(options)
        return self._serialize(value, resolved.indent)

    def minify(self, text: Any) -> FormatResult:
        """Parse ``text`` and serialize it without whitespace."""
        return self._run(text, None)

    def minify_value(self, value: Any) -> FormatResult:
        """Serialize an already parsed value without whitespace."""
        return self._serialize(value, None)

    def _run(self, text: Any, indent: Optional[str]) -> FormatResult:
        if not isinstance(text, str) or not text:
            return FormatResult(
                succeeded=False,
                diagnostic=ErrorDiagnostics.from_empty_or_missing_input(
                    NO_CONTENT_MESSAGE
                ),
            )
        if not text.strip():
            return FormatResult(
                succeeded=False,
                diagnostic=ErrorDiagnostics.from_empty_or_missing_input(
                    EMPTY_CONTENT_MESSAGE
                ),
            )

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
            else:
                diagnostic = None
        if diagnostic is not None:
            return FormatResult(
                succeeded=False,
                diagnostic=diagnostic,
                duration_micros=watch.elapsed_micros,
            )

        result = self._serialize(value, indent)
        return FormatResult(
            succeeded=result.succeeded,
            text=result.text,
            diagnostic=result.diagnostic,
            duration_micros=watch.elapsed_micros + result.duration_micros,
        )

    def _serialize(self, value: Any, indent: Optional[str]) -> FormatResult:
        output = ""
        failure: Optional[BaseException] = None
        with Stopwatch() as watch:
            try:
                output = self.primitives.serialize(value, indent)
            except (SerializationFault, TypeError, ValueError, RecursionError) as e:
                failure = e

        if failure is not None:
            # The value came from a successful parse, so this is a bug
            self.logger.error("Serializer failed on parsed value: %s", failure)
            message = getattr(failure, "message", None) or (
                f"Serialization failed: {failure!r}"
            )
            return FormatResult(
                succeeded=False,
                diagnostic=ErrorDiagnostics.from_unexpected_failure(message),
                duration_micros=watch.elapsed_micros,
            )
        return FormatResult(
            succeeded=True, text=output, duration_micros=watch.elapsed_micros
        )

    def stats(self, text: Any, options: OptionsLike = None) -> FormattingStats:
        """Format and minify ``text`` and report sizes and timings."""
        formatted = self.format(text, options)
        minified = self.minify(text)
        original_bytes = byte_length(text) if isinstance(text, str) else 0
        minified_bytes = byte_length(minified.text) if minified.succeeded else 0

        compression = 0.0
        if minified.succeeded and original_bytes:
            compression = (1 - minified_bytes / original_bytes) * 100

        return FormattingStats(
            original_bytes=original_bytes,
            formatted_bytes=byte_length(formatted.text) if formatted.succeeded else 0,
            minified_bytes=minified_bytes,
            format_duration_micros=formatted.duration_micros,
            minify_duration_micros=minified.duration_micros,
            compression_ratio_percent=compression,
            can_format=formatted.succeeded,
            can_minify=minified.succeeded,
        )
