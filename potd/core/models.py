from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Optional, Tuple, Union


# TODO: confirm against the reference library; its published default MPSJKMDHAI is
# longer than the 8 characters validate_seed accepts.
DEFAULT_SEED = "MPSJKMDH"
DEFAULT_DATE_FORMAT = "%Y-%m-%d"
DEFAULT_OUTPUT_FORMAT = "text"
OUTPUT_FORMAT_CHOICES = ("text", "json")
ISO_DATE_RE = re.compile(r"^([0-9]{4})-([0-9]{2})-([0-9]{2})$")


@dataclass(frozen=True)
class SingleDate:
    date: date


@dataclass(frozen=True)
class DateRange:
    start: date
    end: date


@dataclass(frozen=True)
class DesDump:
    pass


RequestMode = Union[SingleDate, DateRange, DesDump]


@dataclass(frozen=True)
class PotdRequest:
    seed: str
    mode: RequestMode
    output_format: str = DEFAULT_OUTPUT_FORMAT
    # None renders dates in canonical ISO form without reformatting.
    date_format: Optional[str] = None
    output: Optional[Path] = None
    verbose: bool = False

    @property
    def writes_file(self) -> bool:
        return self.output is not None


@dataclass(frozen=True)
class DatedPassword:
    date: date
    password: str


@dataclass(frozen=True)
class DesResult:
    seed: str
    des: str


@dataclass(frozen=True)
class Report:
    text: str
    output_format: str = DEFAULT_OUTPUT_FORMAT

    def as_lines(self) -> Tuple[str, ...]:
        return tuple(self.text.split("\n"))


ReportSource = Union[DatedPassword, Tuple[DatedPassword, ...], DesResult]
