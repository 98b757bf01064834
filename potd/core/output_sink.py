from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import Optional, TextIO

from potd.core.error_dialect import SinkError
from potd.core.models import Report

logger = logging.getLogger(__name__)

OUTPUT_FILE_MODE = 0o644


def _write_console(report: Report, stream: Optional[TextIO]) -> None:
    target = stream if stream is not None else sys.stdout
    target.write(report.text)
    target.write("\n")
    target.flush()


def write_report_file(report: Report, path: Path) -> None:
    """Create or truncate ``path`` and write the report plus one newline."""
    try:
        fd = os.open(str(path), os.O_CREAT | os.O_TRUNC | os.O_WRONLY, OUTPUT_FILE_MODE)
    except OSError as exc:
        raise SinkError(f"Unable to open output file '{path}': {exc.strerror or exc}", path=path) from exc
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as handle:
            handle.write(report.text)
            handle.write("\n")
            handle.flush()
            os.fsync(handle.fileno())
    except OSError as exc:
        raise SinkError(f"Unable to write output file '{path}': {exc.strerror or exc}", path=path) from exc
    logger.info("wrote %s report to %s", report.output_format, path)


def emit(
    report: Report,
    destination: Optional[Path],
    verbose: bool = False,
    *,
    stream: Optional[TextIO] = None,
) -> None:
    if destination is None:
        _write_console(report, stream)
        return
    if verbose:
        _write_console(report, stream)
    write_report_file(report, destination)
