"""
jsontidy size limits and exceptions.
"""

from .exceptions import JsonTidyError, ParseFailure, SerializationFault
from .limits import SizeCheck, SizeGuard, byte_length, format_bytes

__all__ = [
    'JsonTidyError', 'ParseFailure', 'SerializationFault',
    'SizeCheck', 'SizeGuard', 'byte_length', 'format_bytes',
]
