from __future__ import annotations

from datetime import date
from typing import Optional, Union

from potd.core.error_dialect import DateFormatError, InvalidDate
from potd.core.models import DEFAULT_DATE_FORMAT, ISO_DATE_RE


def parse_iso_date(text: str) -> date:
    """Parse a strict ``YYYY-MM-DD`` string.

    The display pattern never takes part in parsing, so a date is accepted or
    rejected the same way whatever ``--date-format`` says.
    """
    match = ISO_DATE_RE.fullmatch(text) if isinstance(text, str) else None
    if match is None:
        raise InvalidDate(f"invalid date {text!r}: expected YYYY-MM-DD")
    year, month, day = (int(part) for part in match.groups())
    try:
        return date(year, month, day)
    except ValueError as e:
        raise InvalidDate(f"invalid date {text!r}: {e}") from e


def format_date(pattern: Optional[str], value: Union[date, str]) -> str:
    day = parse_iso_date(value) if isinstance(value, str) else value
    if pattern is None or pattern == DEFAULT_DATE_FORMAT:
        return day.isoformat()
    if not pattern:
        raise DateFormatError("date format pattern is empty")
    try:
        return day.strftime(pattern)
    except (ValueError, UnicodeError) as e:
        raise DateFormatError(f"unable to apply date format {pattern!r}: {e}") from e
