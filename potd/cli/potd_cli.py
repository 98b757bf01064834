#!/usr/bin/env python3
from __future__ import annotations

import argparse
import logging
import sys

from potd import __version__
from potd.core.config import load_config
from potd.core.error_dialect import PotdError, format_error_text
from potd.core.generation import GenerationAdapter
from potd.core.models import OUTPUT_FORMAT_CHOICES
from potd.core.potd_service import run_request
from potd.core.resolver import resolve_request

EXIT_OK = 0
EXIT_FAILURE = 1


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="potd",
        description="ARRIS/CommScope password-of-the-day generator",
    )
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "-s",
        "--seed",
        default=None,
        help="String of 4-8 characters, used in password generation to mutate output",
    )

    # --date and --range are rejected together before any request is resolved.
    when = parser.add_mutually_exclusive_group()
    when.add_argument("-d", "--date", default=None, help="Generate a password for the given date (YYYY-MM-DD)")
    when.add_argument(
        "-r",
        "--range",
        nargs=2,
        metavar=("START", "END"),
        default=None,
        help="Generate a list of passwords given start and end dates (inclusive)",
    )

    parser.add_argument(
        "-D",
        "--des",
        action="store_true",
        help="Output DES representation of seed (ignores --date and --range)",
    )
    parser.add_argument(
        "-f",
        "--format",
        choices=OUTPUT_FORMAT_CHOICES,
        default=None,
        help="Password output format, either text or json (default: text)",
    )
    parser.add_argument(
        "-F",
        "--date-format",
        default=None,
        help="strftime pattern used to display dates, e.g. '%%m/%%d/%%Y' (default: YYYY-MM-DD)",
    )
    parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="Password or list will be written to given filename (overwritten if it exists)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Print output to console even when writing to file",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None, adapter: GenerationAdapter | None = None) -> int:
    args = parse_args(argv)
    try:
        config = load_config()
        logging.basicConfig(
            stream=sys.stderr,
            level=config.log_level_value,
            format="%(levelname)s %(name)s: %(message)s",
        )
        request = resolve_request(
            seed=args.seed,
            date_text=args.date,
            date_range=args.range,
            des=args.des,
            output_format=args.format,
            date_format=args.date_format,
            output=args.output,
            verbose=args.verbose,
            config=config,
        )
        run_request(request, adapter)
    except PotdError as exc:
        print(format_error_text(exc))
        return EXIT_FAILURE
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
