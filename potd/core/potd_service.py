from __future__ import annotations

import logging
from typing import Optional

from potd.core.generation import GenerationAdapter
from potd.core.models import (
    DateRange,
    DatedPassword,
    DesDump,
    DesResult,
    PotdRequest,
    Report,
    ReportSource,
    SingleDate,
)
from potd.core.output_sink import emit
from potd.core.report import render

logger = logging.getLogger(__name__)


def generate_for_request(request: PotdRequest, adapter: Optional[GenerationAdapter] = None) -> ReportSource:
    adapter = adapter if adapter is not None else GenerationAdapter()
    mode = request.mode
    if isinstance(mode, DesDump):
        return DesResult(seed=request.seed, des=adapter.seed_to_des(request.seed))
    if isinstance(mode, DateRange):
        return adapter.generate_multiple(mode.start, mode.end, request.seed)
    if isinstance(mode, SingleDate):
        return DatedPassword(date=mode.date, password=adapter.generate(mode.date, request.seed))
    raise TypeError(f"unsupported request mode: {mode!r}")


def build_report(request: PotdRequest, adapter: Optional[GenerationAdapter] = None) -> Report:
    result = generate_for_request(request, adapter)
    logger.debug("rendering %s report for %s", request.output_format, type(request.mode).__name__)
    return render(request.output_format, request.date_format, result)


def run_request(request: PotdRequest, adapter: Optional[GenerationAdapter] = None) -> Report:
    # The whole report is rendered before anything is written.
    report = build_report(request, adapter)
    emit(report, request.output, request.verbose)
    return report
