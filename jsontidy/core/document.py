"""
Document model for hosts that keep one JSON buffer per editor.

The core itself is stateless; this class is the mutable holder a host keeps
between calls. It never persists anything.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional, Union

from ..security.limits import byte_length
from ..utils.config import DEFAULT_MAX_SIZE_BYTES
from .processor import OutputFormat, ProcessingResult


@dataclass
class JSONDocument:
    """The JSON text being edited, plus its last processing outcome."""

    raw_content: str = ""
    formatted_content: str = ""
    minified_content: str = ""
    is_valid: bool = False
    error_message: Optional[str] = None
    error_position: Optional[int] = None
    size: int = 0
    last_modified: datetime = field(default_factory=datetime.now)

    def __post_init__(self) -> None:
        self.raw_content = self.raw_content or ""
        self._update_size()

    def set_raw_content(self, content: Optional[str]) -> None:
        """Replace the raw text and reset everything derived from it."""
        self.raw_content = content or ""
        self.formatted_content = ""
        self.minified_content = ""
        self.is_valid = False
        self.error_message = None
        self.error_position = None
        self.last_modified = datetime.now()
        self._update_size()

    def set_formatted_content(self, content: Optional[str]) -> None:
        self.formatted_content = content or ""

    def set_minified_content(self, content: Optional[str]) -> None:
        self.minified_content = content or ""

    def set_validation_state(
        self,
        is_valid: bool,
        error_message: Optional[str] = None,
        error_position: Optional[int] = None,
    ) -> None:
        self.is_valid = is_valid
        self.error_message = error_message
        self.error_position = error_position

    def apply_result(self, result: ProcessingResult) -> None:
        """Copy the outputs and verdict of a processing run onto the document."""
        self.set_formatted_content(result.formatted_text)
        self.set_minified_content(result.minified_text)
        diagnostic = result.diagnostic
        self.set_validation_state(
            result.succeeded,
            diagnostic.message if diagnostic else None,
            diagnostic.byte_position if diagnostic else None,
        )

    def get_content(
        self, output_format: Union[OutputFormat, str] = OutputFormat.FORMATTED
    ) -> str:
        """Processed content in the requested format, or the raw text."""
        if OutputFormat(output_format) is OutputFormat.MINIFIED:
            return self.minified_content or self.raw_content
        return self.formatted_content or self.raw_content

    def has_processed_content(self) -> bool:
        return bool(self.formatted_content or self.minified_content)

    def is_empty(self) -> bool:
        return not self.raw_content.strip()

    def metadata(self) -> dict[str, Any]:
        return {
            "size": self.size,
            "is_valid": self.is_valid,
            "has_error": bool(self.error_message),
            "last_modified": self.last_modified,
            "has_processed_content": self.has_processed_content(),
        }

    def validate_size(self, max_bytes: int = DEFAULT_MAX_SIZE_BYTES) -> bool:
        return self.size <= max_bytes

    def clone(self) -> "JSONDocument":
        return JSONDocument(
            raw_content=self.raw_content,
            formatted_content=self.formatted_content,
            minified_content=self.minified_content,
            is_valid=self.is_valid,
            error_message=self.error_message,
            error_position=self.error_position,
            last_modified=self.last_modified,
        )

    def _update_size(self) -> None:
        self.size = byte_length(self.raw_content)
