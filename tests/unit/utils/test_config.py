"""
Test cases for configuration and per-call options.

Tests focus on defaults, clamping of invalid values, and the warnings that
report every value replaced by a default.
"""

import logging
import unittest

from jsontidy.utils.config import (
    DEFAULT_INDENTATION,
    DEFAULT_MAX_SIZE_BYTES,
    IndentationSettings,
    ProcessOptions,
    SizeLimits,
    TidyConfig,
)


class TestTidyConfig(unittest.TestCase):
    """Test component configuration."""

    def test_defaults(self):
        config = TidyConfig()
        self.assertEqual(config.max_size_bytes, 1048576)
        self.assertEqual(config.default_indentation, 2)
        self.assertEqual(config.max_indentation, 8)
        self.assertEqual(config.indentation.indent_char, " ")

    def test_invalid_ceiling_clamped(self):
        """Non-positive ceilings fall back to the default."""
        for value in [0, -5, "big", None]:
            with self.subTest(value=value):
                self.assertEqual(
                    SizeLimits(max_size_bytes=value).max_size_bytes,
                    DEFAULT_MAX_SIZE_BYTES,
                )

    def test_indentation_clamped(self):
        """Widths are kept within 1..8."""
        self.assertEqual(IndentationSettings(max_width=20).max_width, 8)
        self.assertEqual(IndentationSettings(max_width=0).max_width, 1)
        self.assertEqual(IndentationSettings(default_width=9).default_width, 2)
        self.assertEqual(IndentationSettings(default_width=4).default_width, 4)
        self.assertEqual(
            IndentationSettings(default_width=2, max_width=1).default_width, 1
        )
        self.assertEqual(IndentationSettings(indent_char="-").indent_char, " ")

    def test_frozen(self):
        """Configuration cannot be mutated after construction."""
        config = TidyConfig()
        with self.assertRaises(AttributeError):
            config.limits = SizeLimits(10)

    def test_logger(self):
        """A configured logger replaces the module logger."""
        custom = logging.getLogger("host.jsontidy")
        self.assertIs(TidyConfig(logger=custom).get_logger("x"), custom)
        self.assertIs(TidyConfig().get_logger("x"), logging.getLogger("x"))


class TestProcessOptions(unittest.TestCase):
    """Test per-call option resolution."""

    def test_unset_options_use_config(self):
        config = TidyConfig(
            limits=SizeLimits(500),
            indentation=IndentationSettings(default_width=4, indent_char="\t"),
        )
        resolved = ProcessOptions().resolve(config)
        self.assertEqual(resolved.max_size_bytes, 500)
        self.assertEqual(resolved.indentation_width, 4)
        self.assertEqual(resolved.indent, "\t\t\t\t")
        self.assertEqual(resolved.warnings, ())

    def test_valid_options(self):
        resolved = ProcessOptions(
            indentation_width=8, max_size_bytes=10, indent_char="\t"
        ).resolve()
        self.assertEqual(resolved.indentation_width, 8)
        self.assertEqual(resolved.max_size_bytes, 10)
        self.assertEqual(resolved.indent, "\t" * 8)

    def test_invalid_options_warn(self):
        """Every replaced value produces one warning."""
        resolved = ProcessOptions(
            indentation_width=20, max_size_bytes=-1, indent_char="ab"
        ).resolve()
        self.assertEqual(resolved.indentation_width, DEFAULT_INDENTATION)
        self.assertEqual(resolved.max_size_bytes, DEFAULT_MAX_SIZE_BYTES)
        self.assertEqual(resolved.indent_char, " ")
        self.assertEqual(len(resolved.warnings), 3)

    def test_from_mapping(self):
        """Host keys in either naming style are recognised."""
        options = ProcessOptions.from_mapping(
            {"indentation": 4, "maxSize": 100, "indentChar": "\t", "theme": "dark"}
        )
        self.assertEqual(options, ProcessOptions(4, 100, "\t"))
        self.assertEqual(ProcessOptions.from_mapping(None), ProcessOptions())

    def test_from_mapping_skips_none(self):
        options = ProcessOptions.from_mapping({"max_size_bytes": None})
        self.assertIsNone(options.max_size_bytes)

    def test_coerce(self):
        options = ProcessOptions(indentation_width=3)
        self.assertIs(ProcessOptions.coerce(options), options)
        self.assertEqual(ProcessOptions.coerce(None), ProcessOptions())
        self.assertEqual(
            ProcessOptions.coerce({"indentation_width": 3}), options
        )


if __name__ == "__main__":
    unittest.main()
