"""
jsontidy - validate, pretty-print and minify JSON with actionable diagnostics.

jsontidy wraps Python's json module with the checks an editor needs before
showing JSON to a user: a byte ceiling, empty-input handling, syntax errors
translated into line/column diagnostics with a remediation hint, and size
and timing statistics for the formatted and minified outputs.

Quick Start:
    import jsontidy

    result = jsontidy.process('{"a":1}')
    result.formatted_text   # '{\\n  "a": 1\\n}'
    result.minified_text    # '{"a":1}'

    verdict = jsontidy.validate('{"a": 1,}')
    verdict.diagnostic.formatted_message()

    # Explicit configuration instead of process-wide defaults
    from jsontidy import Processor, TidyConfig, SizeLimits
    processor = Processor(TidyConfig(limits=SizeLimits(max_size_bytes=4096)))
    processor.process(text, {"indentation": 4})
"""

import logging

from .core.diagnostics import Diagnostic, ErrorCategory, ErrorDiagnostics, Position
from .core.document import JSONDocument
from .core.formatter import FormatResult, Formatter, FormattingStats
from .core.primitives import JsonPrimitives, NumberLiteral
from .core.processor import (
    OutputFormat, ProcessingResult, ProcessingStats, Processor, Statistics, process
)
from .core.validator import ValidationStats, ValidationVerdict, Validator, validate
from .security.exceptions import JsonTidyError, ParseFailure, SerializationFault
from .security.limits import SizeCheck, SizeGuard, format_bytes
from .utils.config import (
    IndentationSettings, ProcessOptions, ResolvedOptions, SizeLimits, TidyConfig
)

__version__ = "0.1.0"
__author__ = "jsontidy contributors"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # One-call helpers
    "process", "validate",
    # Components
    "Processor", "Validator", "Formatter", "SizeGuard", "ErrorDiagnostics",
    "JsonPrimitives", "NumberLiteral", "JSONDocument",
    # Results
    "ProcessingResult", "ValidationVerdict", "FormatResult", "Statistics",
    "ProcessingStats", "ValidationStats", "FormattingStats", "SizeCheck",
    "Diagnostic", "ErrorCategory", "Position", "OutputFormat",
    # Configuration
    "TidyConfig", "SizeLimits", "IndentationSettings", "ProcessOptions",
    "ResolvedOptions",
    # Exceptions
    "JsonTidyError", "ParseFailure", "SerializationFault",
    # Helpers
    "format_bytes",
]
