"""
Test cases for size limits.

Tests focus on UTF-8 byte measurement, the ceiling boundary, and
human-readable size formatting.
"""

import unittest

from jsontidy.security.limits import SizeGuard, byte_length, format_bytes
from jsontidy.utils.config import DEFAULT_MAX_SIZE_BYTES


class TestByteLength(unittest.TestCase):
    """Test UTF-8 byte measurement."""

    def test_ascii(self):
        self.assertEqual(byte_length("abc"), 3)

    def test_multibyte(self):
        """Characters are measured by their encoded width."""
        self.assertEqual(byte_length("é"), 2)
        self.assertEqual(byte_length("€"), 3)
        self.assertEqual(byte_length("😀"), 4)

    def test_empty(self):
        self.assertEqual(byte_length(""), 0)


class TestFormatBytes(unittest.TestCase):
    """Test human-readable sizes."""

    def test_values(self):
        """Binary units with at most two decimals."""
        cases = {
            0: "0 Bytes",
            1: "1 Bytes",
            1000: "1000 Bytes",
            1024: "1 KB",
            1536: "1.5 KB",
            2000: "1.95 KB",
            1024 * 1024: "1 MB",
            5 * 1024 ** 3: "5 GB",
            3 * 1024 ** 4: "3 TB",
        }
        for size, expected in cases.items():
            with self.subTest(size=size):
                self.assertEqual(format_bytes(size), expected)


class TestSizeGuard(unittest.TestCase):
    """Test SizeGuard.check."""

    def setUp(self):
        self.guard = SizeGuard(max_bytes=10)

    def test_within_limit(self):
        check = self.guard.check("x" * 10)
        self.assertTrue(check.within_limit)
        self.assertEqual(check.size_bytes, 10)
        self.assertEqual(check.max_bytes, 10)

    def test_over_limit(self):
        check = self.guard.check("x" * 11)
        self.assertFalse(check.within_limit)
        self.assertEqual(check.human_size, "11 Bytes")
        self.assertEqual(check.human_limit, "10 Bytes")

    def test_call_limit_overrides(self):
        """A per-call ceiling replaces the guard's own."""
        self.assertTrue(self.guard.check("x" * 20, 20).within_limit)

    def test_multibyte_boundary(self):
        """Five two-byte characters fill a ten-byte ceiling exactly."""
        self.assertTrue(self.guard.check("é" * 5).within_limit)
        self.assertFalse(self.guard.check("é" * 5 + "x").within_limit)

    def test_default_limit(self):
        self.assertEqual(SizeGuard().max_bytes, DEFAULT_MAX_SIZE_BYTES)


if __name__ == "__main__":
    unittest.main()
