"""
Configuration and options for jsontidy processing.

This module defines the immutable configuration handed to the validator,
formatter and processor at construction time, plus the per-call options a
host passes to each operation.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Optional, Union

DEFAULT_MAX_SIZE_BYTES = 1024 * 1024
DEFAULT_INDENTATION = 2
MAX_INDENTATION = 8
DEFAULT_INDENT_CHAR = " "
ALLOWED_INDENT_CHARS = (" ", "\t")


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class SizeLimits:
    """Input size limits."""

    max_size_bytes: int = DEFAULT_MAX_SIZE_BYTES

    def __post_init__(self) -> None:
        if not _is_int(self.max_size_bytes) or self.max_size_bytes <= 0:
            object.__setattr__(self, "max_size_bytes", DEFAULT_MAX_SIZE_BYTES)


@dataclass(frozen=True)
class IndentationSettings:
    """Pretty-printing indentation settings."""

    default_width: int = DEFAULT_INDENTATION
    max_width: int = MAX_INDENTATION
    indent_char: str = DEFAULT_INDENT_CHAR

    def __post_init__(self) -> None:
        max_width = self.max_width
        if not _is_int(max_width):
            max_width = MAX_INDENTATION
        max_width = max(1, min(MAX_INDENTATION, max_width))
        object.__setattr__(self, "max_width", max_width)

        default_width = self.default_width
        if not _is_int(default_width) or not 1 <= default_width <= max_width:
            default_width = min(DEFAULT_INDENTATION, max_width)
        object.__setattr__(self, "default_width", default_width)

        if self.indent_char not in ALLOWED_INDENT_CHARS:
            object.__setattr__(self, "indent_char", DEFAULT_INDENT_CHAR)


@dataclass(frozen=True)
class TidyConfig:
    """Configuration shared by every jsontidy component."""

    limits: SizeLimits = field(default_factory=SizeLimits)
    indentation: IndentationSettings = field(default_factory=IndentationSettings)
    logger: Optional[logging.Logger] = None

    @property
    def max_size_bytes(self) -> int:
        """Default byte ceiling."""
        return self.limits.max_size_bytes

    @property
    def default_indentation(self) -> int:
        """Default indentation width."""
        return self.indentation.default_width

    @property
    def max_indentation(self) -> int:
        """Largest accepted indentation width."""
        return self.indentation.max_width

    def get_logger(self, name: str) -> logging.Logger:
        """Return the configured logger, or the module logger for ``name``."""
        return self.logger or logging.getLogger(name)


@dataclass(frozen=True)
class ResolvedOptions:
    """Per-call options after defaults and clamping have been applied."""

    indentation_width: int
    max_size_bytes: int
    indent_char: str
    warnings: tuple[str, ...] = ()

    @property
    def indent(self) -> str:
        """Indentation string used by the pretty printer."""
        return self.indent_char * self.indentation_width


# Host-side keys accepted by ProcessOptions.from_mapping
_MAPPING_KEYS = {
    "indentation_width": "indentation_width",
    "indentation": "indentation_width",
    "indentationWidth": "indentation_width",
    "max_size_bytes": "max_size_bytes",
    "max_size": "max_size_bytes",
    "maxSize": "max_size_bytes",
    "maxSizeBytes": "max_size_bytes",
    "indent_char": "indent_char",
    "indentChar": "indent_char",
}


@dataclass(frozen=True)
class ProcessOptions:
    """Options a caller may pass to a single operation.

    Every field is optional; unset fields take the component defaults from
    :class:`TidyConfig`. Out-of-range values are never rejected: they are
    replaced by the default and reported in ``ResolvedOptions.warnings``.
    """

    indentation_width: Optional[int] = None
    max_size_bytes: Optional[int] = None
    indent_char: Optional[str] = None

    @classmethod
    def from_mapping(cls, options: Optional[Mapping[str, Any]]) -> "ProcessOptions":
        """Build options from a loosely-shaped mapping, ignoring unknown keys."""
        if not options:
            return cls()
        values: dict[str, Any] = {}
        for key, value in options.items():
            target = _MAPPING_KEYS.get(key)
            if target is not None and value is not None:
                values[target] = value
        return cls(**values)

    @classmethod
    def coerce(
        cls, options: "Optional[Union[ProcessOptions, Mapping[str, Any]]]"
    ) -> "ProcessOptions":
        """Accept ``None``, a mapping, or an existing ProcessOptions."""
        if options is None:
            return cls()
        if isinstance(options, ProcessOptions):
            return options
        return cls.from_mapping(options)

    def resolve(self, config: Optional[TidyConfig] = None) -> ResolvedOptions:
        """Apply defaults from ``config`` and clamp invalid values."""
        config = config or TidyConfig()
        warnings: list[str] = []

        width = config.default_indentation
        if self.indentation_width is not None:
            if (
                _is_int(self.indentation_width)
                and 1 <= self.indentation_width <= config.max_indentation
            ):
                width = self.indentation_width
            else:
                warnings.append(
                    f"indentation_width {self.indentation_width!r} is outside "
                    f"1..{config.max_indentation}; using {width}"
                )

        max_size = config.max_size_bytes
        if self.max_size_bytes is not None:
            if _is_int(self.max_size_bytes) and self.max_size_bytes > 0:
                max_size = self.max_size_bytes
            else:
                warnings.append(
                    f"max_size_bytes {self.max_size_bytes!r} is not a positive "
                    f"integer; using {max_size}"
                )

        indent_char = config.indentation.indent_char
        if self.indent_char is not None:
            if self.indent_char in ALLOWED_INDENT_CHARS:
                indent_char = self.indent_char
            else:
                warnings.append(
                    f"indent_char {self.indent_char!r} is not a space or tab; "
                    f"using {indent_char!r}"
                )

        return ResolvedOptions(
            indentation_width=width,
            max_size_bytes=max_size,
            indent_char=indent_char,
            warnings=tuple(warnings),
        )
