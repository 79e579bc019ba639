"""
Size limits for jsontidy.

This module measures input text in UTF-8 bytes and checks it against the
configured byte ceiling before any parsing work is attempted.
"""

from dataclasses import dataclass
from typing import Optional

from ..utils.config import DEFAULT_MAX_SIZE_BYTES

_BYTE_UNITS = ("Bytes", "KB", "MB", "GB", "TB")


def byte_length(text: str) -> int:
    """Return the UTF-8 encoded length of ``text``."""
    return len(text.encode("utf-8", errors="surrogatepass"))


def format_bytes(size: int) -> str:
    """
    Format a byte count using binary units.

    Args:
        size: Number of bytes

    Returns:
        A string such as ``"0 Bytes"``, ``"512 Bytes"`` or ``"1.5 KB"``
    """
    if size <= 0:
        return "0 Bytes"

    value = float(size)
    unit = 0
    while value >= 1024 and unit < len(_BYTE_UNITS) - 1:
        value /= 1024
        unit += 1

    rendered = f"{value:.2f}".rstrip("0").rstrip(".")
    return f"{rendered} {_BYTE_UNITS[unit]}"


@dataclass(frozen=True)
class SizeCheck:
    """Outcome of a byte ceiling check."""

    size_bytes: int
    max_bytes: int
    within_limit: bool

    @property
    def human_size(self) -> str:
        """Measured size as a human readable string."""
        return format_bytes(self.size_bytes)

    @property
    def human_limit(self) -> str:
        """Ceiling as a human readable string."""
        return format_bytes(self.max_bytes)


class SizeGuard:
    """Checks input text against a byte ceiling."""

    def __init__(self, max_bytes: int = DEFAULT_MAX_SIZE_BYTES):
        self.max_bytes = max_bytes

    def check(self, text: str, max_bytes: Optional[int] = None) -> SizeCheck:
        """Measure ``text`` and compare it with ``max_bytes``."""
        limit = self.max_bytes if max_bytes is None else max_bytes
        size = byte_length(text) if text else 0
        return SizeCheck(size_bytes=size, max_bytes=limit, within_limit=size <= limit)
