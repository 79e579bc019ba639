"""
jsontidy configuration.
"""

from .config import (
    IndentationSettings, ProcessOptions, ResolvedOptions, SizeLimits, TidyConfig
)

__all__ = [
    'IndentationSettings', 'ProcessOptions', 'ResolvedOptions', 'SizeLimits',
    'TidyConfig',
]
