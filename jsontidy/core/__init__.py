"""
jsontidy core: diagnostics, validation, formatting and processing.
"""

from .diagnostics import Diagnostic, ErrorCategory, ErrorDiagnostics, Position
from .document import JSONDocument
from .formatter import FormatResult, Formatter, FormattingStats
from .primitives import JsonPrimitives, NumberLiteral, ParsePrimitive
from .processor import (
    OutputFormat, ProcessingResult, ProcessingStats, Processor, Statistics, process
)
from .validator import ValidationStats, ValidationVerdict, Validator, validate

__all__ = [
    'Diagnostic', 'ErrorCategory', 'ErrorDiagnostics', 'Position',
    'JSONDocument',
    'FormatResult', 'Formatter', 'FormattingStats',
    'JsonPrimitives', 'NumberLiteral', 'ParsePrimitive',
    'OutputFormat', 'ProcessingResult', 'ProcessingStats', 'Processor',
    'Statistics', 'process',
    'ValidationStats', 'ValidationVerdict', 'Validator', 'validate',
]
