"""
Processor for jsontidy - validates, formats and minifies in one call.

The processor is the facade a host talks to. It validates once, hands the
parsed value to the formatter for both outputs, and derives statistics.
"""

from collections.abc import Mapping
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Optional, Union

from ..security.limits import byte_length
from ..utils.config import ProcessOptions, TidyConfig
from .diagnostics import Diagnostic
from .formatter import FormatResult, Formatter, FormattingStats
from .primitives import ParsePrimitive
from .validator import ValidationStats, ValidationVerdict, Validator

OptionsLike = Union[ProcessOptions, Mapping[str, Any], None]


class OutputFormat(Enum):
    """Which output a caller wants selected."""

    FORMATTED = "formatted"
    MINIFIED = "minified"

    @classmethod
    def _missing_(cls, value: object) -> "OutputFormat":
        # Anything other than "minified" selects the formatted output
        return cls.FORMATTED

    @classmethod
    def is_known(cls, value: Any) -> bool:
        """True when ``value`` names a format without falling back."""
        return isinstance(value, OutputFormat) or value in tuple(
            member.value for member in cls
        )


@dataclass(frozen=True)
class Statistics:
    """Derived sizes and ratios for a successfully processed text."""

    original_bytes: int
    formatted_bytes: int
    minified_bytes: int
    compression_ratio_percent: float
    expansion_ratio_percent: float
    line_count: int
    character_count: int

    @classmethod
    def compute(cls, original: str, formatted: str, minified: str) -> "Statistics":
        """Compute statistics from the three texts."""
        original_bytes = byte_length(original)
        formatted_bytes = byte_length(formatted)
        minified_bytes = byte_length(minified)
        return cls(
            original_bytes=original_bytes,
            formatted_bytes=formatted_bytes,
            minified_bytes=minified_bytes,
            compression_ratio_percent=(1 - minified_bytes / original_bytes) * 100,
            expansion_ratio_percent=(formatted_bytes / original_bytes - 1) * 100,
            line_count=formatted.count("\n") + 1,
            character_count=len(original),
        )


@dataclass(frozen=True)
class ProcessingResult:
    """Everything one ``process`` call produced."""

    verdict: ValidationVerdict
    formatted: Optional[FormatResult] = None
    minified: Optional[FormatResult] = None
    statistics: Optional[Statistics] = None
    diagnostic: Optional[Diagnostic] = None
    processing_time_micros: float = 0.0
    selected_format: Optional[OutputFormat] = None
    selected_output: Optional[str] = None
    option_warnings: tuple[str, ...] = ()

    @property
    def valid(self) -> bool:
        return self.verdict.valid

    @property
    def succeeded(self) -> bool:
        """True when validation and both serializations succeeded."""
        return self.diagnostic is None and self.statistics is not None

    @property
    def formatted_text(self) -> str:
        if self.formatted and self.formatted.succeeded:
            return self.formatted.text
        return ""

    @property
    def minified_text(self) -> str:
        if self.minified and self.minified.succeeded:
            return self.minified.text
        return ""


@dataclass(frozen=True)
class ProcessingStats:
    """Validation and formatting statistics for one text."""

    validation: ValidationStats
    formatting: FormattingStats
    total_duration_micros: float


class Processor:
    """Runs the validator and the formatter as one pipeline."""

    def __init__(
        self,
        config: Optional[TidyConfig] = None,
        primitives: Optional[ParsePrimitive] = None,
    ):
        self.config = config or TidyConfig()
        self.validator = Validator(self.config, primitives)
        self.formatter = Formatter(self.config, primitives)
        self.logger = self.config.get_logger(__name__)

    def process(self, text: Any, options: OptionsLike = None) -> ProcessingResult:
        """Validate ``text`` and, when valid, produce both outputs."""
        resolved = self.formatter.resolve_options(options)
        # Already resolved; hand the concrete values down so nothing is logged twice
        call_options = ProcessOptions(
            indentation_width=resolved.indentation_width,
            max_size_bytes=resolved.max_size_bytes,
            indent_char=resolved.indent_char,
        )

        verdict = self.validator.validate(text, call_options)
        elapsed = verdict.parse_duration_micros
        if not verdict.valid:
            return ProcessingResult(
                verdict=verdict,
                diagnostic=verdict.diagnostic,
                processing_time_micros=elapsed,
                option_warnings=resolved.warnings,
            )

        formatted = self.formatter.format_value(verdict.value, call_options)
        elapsed += formatted.duration_micros
        if not formatted.succeeded:
            return ProcessingResult(
                verdict=verdict,
                formatted=formatted,
                diagnostic=formatted.diagnostic,
                processing_time_micros=elapsed,
                option_warnings=resolved.warnings,
            )

        minified = self.formatter.minify_value(verdict.value)
        elapsed += minified.duration_micros
        if not minified.succeeded:
            return ProcessingResult(
                verdict=verdict,
                formatted=formatted,
                minified=minified,
                diagnostic=minified.diagnostic,
                processing_time_micros=elapsed,
                option_warnings=resolved.warnings,
            )

        statistics = Statistics.compute(text, formatted.text, minified.text)
        self.logger.debug(
            "Processed %d bytes in %.1fus (%.1f%% smaller minified)",
            statistics.original_bytes,
            elapsed,
            statistics.compression_ratio_percent,
        )
        return ProcessingResult(
            verdict=verdict,
            formatted=formatted,
            minified=minified,
            statistics=statistics,
            processing_time_micros=elapsed,
            option_warnings=resolved.warnings,
        )

    def process_with_format(
        self,
        text: Any,
        output_format: Union[OutputFormat, str],
        options: OptionsLike = None,
    ) -> ProcessingResult:
        """Process ``text`` and select one of the outputs.

        Unknown formats select the formatted output and add a warning.
        """
        selected = OutputFormat(output_format)
        result = self.process(text, options)
        if not OutputFormat.is_known(output_format):
            warning = (
                f"output_format {output_format!r} is not 'formatted' or "
                f"'minified'; using '{selected.value}'"
            )
            self.logger.warning("Option replaced by default: %s", warning)
            result = replace(
                result, option_warnings=result.option_warnings + (warning,)
            )
        if not result.succeeded:
            return result
        output = (
            result.minified_text
            if selected is OutputFormat.MINIFIED
            else result.formatted_text
        )
        return replace(result, selected_format=selected, selected_output=output)

    def validate_only(
        self, text: Any, options: OptionsLike = None
    ) -> ValidationVerdict:
        return self.validator.validate(text, options)

    def format_only(self, text: Any, options: OptionsLike = None) -> FormatResult:
        return self.formatter.format(text, options)

    def minify_only(self, text: Any) -> FormatResult:
        return self.formatter.minify(text)

    def stats(self, text: Any, options: OptionsLike = None) -> ProcessingStats:
        """Collect validation and formatting statistics for ``text``."""
        validation = self.validator.stats(text, options)
        formatting = self.formatter.stats(text, options)
        return ProcessingStats(
            validation=validation,
            formatting=formatting,
            total_duration_micros=(
                validation.parse_duration_micros
                + formatting.format_duration_micros
                + formatting.minify_duration_micros
            ),
        )


def process(text: Any, options: OptionsLike = None) -> ProcessingResult:
    """Process ``text`` with the default configuration."""
    return Processor().process(text, options)
