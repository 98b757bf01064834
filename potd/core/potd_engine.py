r"""
potd_engine: ARRIS / CommScope password-of-the-day algorithm

The password for a day is derived from two inputs:
  - the calendar date (day of week, day of month, month, two-digit year)
  - a 4-8 character seed shared with the cable modem

Each of the ten output characters is drawn from a 36 character alphabet after
mixing the date values with the seed, permuting the mix by a checksum and
mixing in the seed once more.

"""
from __future__ import annotations

from datetime import date, timedelta
from typing import Iterator, List, Tuple

from potd.core.models import ISO_DATE_RE

SEED_MIN_LENGTH = 4
SEED_MAX_LENGTH = 8
PASSWORD_LENGTH = 10
DES_KEY_BYTES = 8

ALPHANUM = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"
_MODULUS = len(ALPHANUM)

# Indexed by weekday, Monday first.
_WEEKDAY_TABLE = (
    (15, 15, 24, 20, 24),
    (13, 14, 27, 32, 10),
    (29, 14, 32, 29, 24),
    (23, 32, 24, 29, 29),
    (14, 29, 10, 21, 29),
    (34, 27, 16, 23, 30),
    (14, 22, 24, 17, 13),
)

# Indexed by checksum % 6; position 3 always takes the squared selector.
_PERMUTATION_TABLE = (
    (0, 1, 2, 9, 3, 4, 5, 6, 7, 8),
    (1, 4, 3, 9, 0, 7, 8, 2, 5, 6),
    (7, 2, 8, 9, 4, 1, 6, 0, 3, 5),
    (6, 3, 5, 9, 1, 8, 2, 7, 4, 0),
    (4, 7, 0, 9, 5, 2, 3, 1, 8, 6),
    (5, 6, 1, 9, 8, 0, 4, 3, 2, 7),
)


class SeedError(ValueError):
    pass


class DateError(ValueError):
    pass


class RangeError(ValueError):
    pass


# ---------------- Input validation ----------------

def validate_seed(seed: str) -> str:
    if not isinstance(seed, str):
        raise SeedError("seed must be a string")
    if not SEED_MIN_LENGTH <= len(seed) <= SEED_MAX_LENGTH:
        raise SeedError(
            f"seed must be between {SEED_MIN_LENGTH} and {SEED_MAX_LENGTH} characters (got {len(seed)})"
        )
    if not seed.isascii():
        raise SeedError("seed must contain ASCII characters only")
    return seed


def parse_date(value: str) -> date:
    match = ISO_DATE_RE.fullmatch(value) if isinstance(value, str) else None
    if match is None:
        raise DateError(f"invalid date {value!r}: expected YYYY-MM-DD")
    year, month, day = (int(part) for part in match.groups())
    try:
        return date(year, month, day)
    except ValueError as e:
        raise DateError(f"invalid date {value!r}: {e}") from e


def iter_dates(start: date, end: date) -> Iterator[date]:
    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)


# ---------------- Algorithm ----------------

def _date_values(day: date) -> List[int]:
    year = day.year % 100
    values = list(_WEEKDAY_TABLE[day.weekday()])
    values.append(day.day)
    # Stays in 0..35 even when the day is larger than year + month.
    values.append((year + day.month - day.day) % _MODULUS)
    values.append(((3 + (year + day.month) % 12) * day.day) % 37 % _MODULUS)
    return values


def _password_for(day: date, seed: str) -> str:
    seed_codes = [ord(seed[i % len(seed)]) for i in range(PASSWORD_LENGTH)]

    mixed = [(value + seed_codes[i]) % _MODULUS for i, value in enumerate(_date_values(day))]
    checksum = sum(mixed) % _MODULUS
    mixed.append(checksum)
    selector = checksum % 6
    mixed.append(selector * selector)

    permuted = [mixed[index] for index in _PERMUTATION_TABLE[selector]]
    return "".join(ALPHANUM[(seed_codes[i] + value) % _MODULUS] for i, value in enumerate(permuted))


def generate(day: str, seed: str) -> str:
    """Return the password of the day for an ISO date string."""
    validate_seed(seed)
    return _password_for(parse_date(day), seed)


def generate_multiple(start: str, end: str, seed: str) -> List[Tuple[str, str]]:
    """Return ``(iso_date, password)`` pairs for every day of an inclusive range."""
    validate_seed(seed)
    first = parse_date(start)
    last = parse_date(end)
    if first > last:
        raise RangeError(f"range start {first.isoformat()} is after range end {last.isoformat()}")
    return [(day.isoformat(), _password_for(day, seed)) for day in iter_dates(first, last)]


def seed_to_des(seed: str) -> str:
    """Render the seed as an 8-byte DES key with odd parity, uppercase hex."""
    raw = validate_seed(seed).encode("ascii").ljust(DES_KEY_BYTES, b"\x00")
    key = bytearray()
    for byte in raw:
        high = byte & 0xFE
        parity = 1 if bin(high).count("1") % 2 == 0 else 0
        key.append(high | parity)
    return key.hex().upper()
