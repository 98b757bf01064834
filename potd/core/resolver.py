from __future__ import annotations

import logging
from datetime import date
from pathlib import Path
from typing import Optional, Sequence

from potd.core.config import PotdConfig
from potd.core.date_format import parse_iso_date
from potd.core.error_dialect import InvalidRequest
from potd.core.models import (
    DEFAULT_OUTPUT_FORMAT,
    OUTPUT_FORMAT_CHOICES,
    DateRange,
    DesDump,
    PotdRequest,
    RequestMode,
    SingleDate,
)

logger = logging.getLogger(__name__)


def _resolve_mode(
    date_text: Optional[str],
    date_range: Optional[Sequence[str]],
    des: bool,
    today: Optional[date],
) -> RequestMode:
    if date_text is not None and date_range is not None:
        raise InvalidRequest("--date and --range cannot be combined")
    if des:
        if date_text is not None or date_range is not None:
            logger.debug("--des given; ignoring date/range arguments")
        return DesDump()
    if date_range is not None:
        if len(date_range) != 2:
            raise InvalidRequest("range needs exactly two dates: START END")
        start, end = date_range
        return DateRange(start=parse_iso_date(start), end=parse_iso_date(end))
    if date_text is not None:
        return SingleDate(date=parse_iso_date(date_text))
    return SingleDate(date=today if today is not None else date.today())


def _resolve_output(output: Optional[str]) -> Optional[Path]:
    if output is None:
        return None
    if not output.strip():
        raise InvalidRequest("output path must not be empty")
    path = Path(output).expanduser()
    return path if path.is_absolute() else Path.cwd() / path


def resolve_request(
    *,
    seed: Optional[str] = None,
    date_text: Optional[str] = None,
    date_range: Optional[Sequence[str]] = None,
    des: bool = False,
    output_format: Optional[str] = None,
    date_format: Optional[str] = None,
    output: Optional[str] = None,
    verbose: bool = False,
    today: Optional[date] = None,
    config: Optional[PotdConfig] = None,
) -> PotdRequest:
    config = config if config is not None else PotdConfig()

    fmt = DEFAULT_OUTPUT_FORMAT if output_format is None else output_format.strip().lower()
    if fmt not in OUTPUT_FORMAT_CHOICES:
        raise InvalidRequest(f"format must be one of {', '.join(OUTPUT_FORMAT_CHOICES)} (got {output_format!r})")

    request = PotdRequest(
        seed=config.default_seed if seed is None else seed,
        mode=_resolve_mode(date_text, date_range, des, today),
        output_format=fmt,
        date_format=date_format,
        output=_resolve_output(output),
        verbose=bool(verbose),
    )
    if request.verbose and not request.writes_file:
        logger.debug("--verbose has no effect without --output")
    return request
