from __future__ import annotations

import json
from typing import Dict, Optional, Sequence

from potd.core.date_format import format_date
from potd.core.error_dialect import InvalidRequest, SerializationError
from potd.core.models import (
    OUTPUT_FORMAT_CHOICES,
    DatedPassword,
    DesResult,
    Report,
    ReportSource,
)

JSON_INDENT = 2
SINGLE_TEXT_SEPARATOR = ": \t"
RANGE_TEXT_SEPARATOR = ":\t"


def _to_json(payload: Dict[str, str]) -> str:
    try:
        return json.dumps(payload, indent=JSON_INDENT, ensure_ascii=False)
    except (TypeError, ValueError) as e:
        raise SerializationError(f"unable to render JSON report: {e}") from e


def _ordered_entries(
    entries: Sequence[DatedPassword], date_format: Optional[str]
) -> list[tuple[str, str]]:
    # Sort on the calendar date, never on the displayed string.
    ordered = sorted(entries, key=lambda item: item.date)
    return [(format_date(date_format, item.date), item.password) for item in ordered]


def _render_single(output_format: str, date_format: Optional[str], result: DatedPassword) -> str:
    shown = format_date(date_format, result.date)
    if output_format == "json":
        return _to_json({shown: result.password})
    return f"{shown}{SINGLE_TEXT_SEPARATOR}{result.password}"


def _render_range(
    output_format: str, date_format: Optional[str], results: Sequence[DatedPassword]
) -> str:
    entries = _ordered_entries(results, date_format)
    if output_format == "json":
        payload: Dict[str, str] = {}
        for shown, password in entries:
            if shown in payload:
                raise SerializationError(
                    f"date format {date_format!r} renders more than one date as {shown!r}"
                )
            payload[shown] = password
        return _to_json(payload)
    return "\n".join(f"{shown}{RANGE_TEXT_SEPARATOR}{password}" for shown, password in entries)


def _render_des(output_format: str, result: DesResult) -> str:
    if output_format == "json":
        return _to_json({"seed": result.seed, "des": result.des})
    return result.des


def render(output_format: str, date_format: Optional[str], result: ReportSource) -> Report:
    if output_format not in OUTPUT_FORMAT_CHOICES:
        raise InvalidRequest(f"unknown output format {output_format!r}")
    if isinstance(result, DesResult):
        text = _render_des(output_format, result)
    elif isinstance(result, DatedPassword):
        text = _render_single(output_format, date_format, result)
    else:
        text = _render_range(output_format, date_format, tuple(result))
    return Report(text=text, output_format=output_format)
