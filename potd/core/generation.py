from __future__ import annotations

import logging
from datetime import date
from typing import Iterable, Protocol, Sequence, Tuple

from potd.core import potd_engine as engine
from potd.core.date_format import parse_iso_date
from potd.core.error_dialect import (
    GenerationError,
    InvalidDate,
    InvalidRange,
    InvalidSeed,
    PotdError,
)
from potd.core.models import DatedPassword

logger = logging.getLogger(__name__)



class PotdBackend(Protocol):
    def generate(self, day: str, seed: str) -> str: ...

    def generate_multiple(self, start: str, end: str, seed: str) -> Sequence[Tuple[str, str]]: ...

    def seed_to_des(self, seed: str) -> str: ...


class ArrisBackend:
    """Default backend backed by ``potd_engine``."""

    def generate(self, day: str, seed: str) -> str:
        return engine.generate(day, seed)

    def generate_multiple(self, start: str, end: str, seed: str) -> Sequence[Tuple[str, str]]:
        return engine.generate_multiple(start, end, seed)

    def seed_to_des(self, seed: str) -> str:
        return engine.seed_to_des(seed)


def _translate(exc: BaseException) -> PotdError:
    message = str(exc)
    if isinstance(exc, PotdError):
        return exc
    if isinstance(exc, engine.SeedError):
        return InvalidSeed(message)
    if isinstance(exc, engine.DateError):
        return InvalidDate(message)
    if isinstance(exc, engine.RangeError):
        return InvalidRange(message)
    return GenerationError(message or type(exc).__name__)


class GenerationAdapter:
    def __init__(self, backend: PotdBackend | None = None) -> None:
        self.backend = backend if backend is not None else ArrisBackend()

    def generate(self, day: date, seed: str) -> str:
        try:
            return self.backend.generate(day.isoformat(), seed)
        except Exception as exc:
            raise _translate(exc) from exc

    def generate_multiple(self, start: date, end: date, seed: str) -> Tuple[DatedPassword, ...]:
        if start > end:
            raise InvalidRange(f"range start {start.isoformat()} is after range end {end.isoformat()}")
        span = (end - start).days + 1
        try:
            pairs = self.backend.generate_multiple(start.isoformat(), end.isoformat(), seed)
        except Exception as exc:
            raise _translate(exc) from exc
        results = _collect_ordered(pairs)
        _check_coverage(results, start, span)
        logger.debug("generated %d password(s) for %s..%s", len(results), start, end)
        return results

    def seed_to_des(self, seed: str) -> str:
        try:
            return self.backend.seed_to_des(seed)
        except Exception as exc:
            raise _translate(exc) from exc


def _collect_ordered(pairs: Iterable[Tuple[str, str]]) -> Tuple[DatedPassword, ...]:
    collected = []
    try:
        for raw_day, password in pairs:
            day = raw_day if isinstance(raw_day, date) else parse_iso_date(raw_day)
            if not isinstance(password, str):
                raise GenerationError(f"backend returned a non-text password for {day.isoformat()}")
            collected.append(DatedPassword(date=day, password=password))
    except GenerationError:
        raise
    except InvalidDate as exc:
        raise GenerationError(f"backend returned an unusable date: {exc.message}") from exc
    except Exception as exc:
        raise GenerationError(f"backend returned a malformed range result: {exc}") from exc
    collected.sort(key=lambda item: item.date)
    return tuple(collected)


def _check_coverage(results: Tuple[DatedPassword, ...], start: date, span: int) -> None:
    days = [item.date for item in results]
    if len(set(days)) != len(days):
        raise GenerationError("backend returned duplicate dates for range")
    if len(days) != span or (days and days[0] != start):
        raise GenerationError(f"backend returned {len(days)} password(s) for a {span} day range")
