from __future__ import annotations

import unittest
from datetime import date, timedelta

from potd.core.error_dialect import GenerationError, InvalidDate, InvalidRange, InvalidSeed
from potd.core.generation import GenerationAdapter
from potd.core.potd_engine import DateError, SeedError


class FakeBackend:
    def __init__(self) -> None:
        self.calls: list[tuple[str, ...]] = []

    def generate(self, day: str, seed: str) -> str:
        self.calls.append(("generate", day, seed))
        return f"{seed}-{day}"

    def generate_multiple(self, start: str, end: str, seed: str):
        self.calls.append(("generate_multiple", start, end, seed))
        first = date.fromisoformat(start)
        last = date.fromisoformat(end)
        days = [(first + timedelta(days=i)).isoformat() for i in range((last - first).days + 1)]
        # Out of order on purpose.
        return [(day, f"{seed}-{day}") for day in reversed(days)]

    def seed_to_des(self, seed: str) -> str:
        self.calls.append(("seed_to_des", seed))
        return seed.encode("ascii").hex()


class FailingBackend(FakeBackend):
    def __init__(self, exc: Exception) -> None:
        super().__init__()
        self.exc = exc

    def generate(self, day: str, seed: str) -> str:
        raise self.exc


class GapBackend(FakeBackend):
    def generate_multiple(self, start: str, end: str, seed: str):
        return [(start, "x")]


class MalformedRangeBackend(FakeBackend):
    def generate_multiple(self, start: str, end: str, seed: str):
        return [(start,)]


class GenerationAdapterTests(unittest.TestCase):
    def test_generate_passes_iso_date_and_result_through(self) -> None:
        backend = FakeBackend()
        adapter = GenerationAdapter(backend)
        self.assertEqual(adapter.generate(date(2024, 1, 1), "ABCD"), "ABCD-2024-01-01")
        self.assertEqual(backend.calls, [("generate", "2024-01-01", "ABCD")])

    def test_generate_multiple_sorts_chronologically(self) -> None:
        adapter = GenerationAdapter(FakeBackend())
        results = adapter.generate_multiple(date(2024, 2, 27), date(2024, 3, 1), "ABCD")
        self.assertEqual(
            [item.date for item in results],
            [date(2024, 2, 27), date(2024, 2, 28), date(2024, 2, 29), date(2024, 3, 1)],
        )

    def test_reversed_range_fails_before_backend_call(self) -> None:
        backend = FakeBackend()
        with self.assertRaises(InvalidRange):
            GenerationAdapter(backend).generate_multiple(date(2024, 1, 2), date(2024, 1, 1), "ABCD")
        self.assertEqual(backend.calls, [])

    def test_multi_decade_range_covers_every_day(self) -> None:
        start = date(2000, 1, 1)
        end = date(2030, 12, 31)
        results = GenerationAdapter(FakeBackend()).generate_multiple(start, end, "ABCD")
        self.assertEqual(len(results), (end - start).days + 1)
        self.assertEqual(results[0].date, start)
        self.assertEqual(results[-1].date, end)
        self.assertEqual(len({item.date for item in results}), len(results))

    def test_malformed_range_pairs_become_generation_error(self) -> None:
        with self.assertRaisesRegex(GenerationError, "malformed range result"):
            GenerationAdapter(MalformedRangeBackend()).generate_multiple(date(2024, 1, 1), date(2024, 1, 1), "ABCD")

    def test_backend_gaps_are_reported(self) -> None:
        with self.assertRaisesRegex(GenerationError, "for a 3 day range"):
            GenerationAdapter(GapBackend()).generate_multiple(date(2024, 1, 1), date(2024, 1, 3), "ABCD")

    def test_backend_errors_map_to_taxonomy_with_verbatim_message(self) -> None:
        cases = [
            (SeedError("seed too short"), InvalidSeed),
            (DateError("bad day"), InvalidDate),
            (RuntimeError("boom"), GenerationError),
            (ValueError("opaque failure"), GenerationError),
        ]
        for exc, expected in cases:
            with self.subTest(exc=exc):
                adapter = GenerationAdapter(FailingBackend(exc))
                with self.assertRaises(expected) as ctx:
                    adapter.generate(date(2024, 1, 1), "ABCD")
                self.assertEqual(ctx.exception.message, str(exc))

    def test_default_backend_rejects_bad_seed_for_des(self) -> None:
        with self.assertRaises(InvalidSeed):
            GenerationAdapter().seed_to_des("abc")


if __name__ == "__main__":
    unittest.main()
