from __future__ import annotations

import unittest

from potd.core.error_dialect import (
    InvalidRange,
    PotdError,
    SinkError,
    error_detail_from_exception,
    format_error_text,
)


class ErrorDialectTests(unittest.TestCase):
    def test_subclasses_carry_stable_codes(self) -> None:
        self.assertEqual(InvalidRange("x").code, "invalid_range")
        self.assertEqual(SinkError("x", path="/tmp/out").code, "sink_error")
        self.assertIsInstance(InvalidRange("x"), ValueError)

    def test_code_normalization(self) -> None:
        self.assertEqual(PotdError("boom", code=" Bad-Seed.Length ").code, "bad_seed_length")
        self.assertEqual(PotdError("boom", code="!!!").code, "invalid_request")

    def test_blank_message(self) -> None:
        self.assertEqual(PotdError("   ").message, "unspecified error")

    def test_format_error_text(self) -> None:
        self.assertEqual(format_error_text(InvalidRange("start after end")), "invalid_range: start after end")
        self.assertEqual(format_error_text(OSError("disk")), "invalid_request: disk")
        self.assertEqual(error_detail_from_exception(ValueError("")).message, "invalid request")


if __name__ == "__main__":
    unittest.main()
