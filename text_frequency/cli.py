from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

import click

from . import analyze_file, render
from .reader import TextFrequencyError
from .report import OUTPUT_FORMATS, AnalysisOptions

LOGGER = logging.getLogger(__name__)


def non_negative_int(value: str) -> int:
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: '{value}'") from exc
    if parsed < 0:
        raise argparse.ArgumentTypeError(f"must be zero or positive, got {parsed}")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="text-frequency",
        description="Rank the words and letters of a text file by frequency",
    )
    parser.add_argument(
        "-f",
        "--file",
        type=Path,
        required=True,
        help="Text file to analyse",
    )
    parser.add_argument(
        "-t",
        "--top",
        type=non_negative_int,
        default=os.getenv("TEXT_FREQUENCY_TOP", "10"),
        help="Display top N letters and words, 0 for all (default: %(default)s or TEXT_FREQUENCY_TOP)",
    )
    parser.add_argument(
        "--format",
        choices=OUTPUT_FORMATS,
        dest="output_format",
        default=os.getenv("TEXT_FREQUENCY_FORMAT", "human"),
        help="Report format (default: %(default)s or TEXT_FREQUENCY_FORMAT)",
    )
    parser.add_argument(
        "-j",
        "--json",
        action="store_const",
        const="json",
        dest="output_format",
        help="Shorthand for --format json",
    )
    parser.add_argument(
        "-n",
        "--no-color",
        action="store_true",
        help="Disable colored headings (also disabled when NO_COLOR is set)",
    )
    parser.add_argument(
        "--encoding",
        default=os.getenv("TEXT_FREQUENCY_ENCODING", "utf-8"),
        help="Encoding used to decode the file (default: %(default)s or TEXT_FREQUENCY_ENCODING)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Log progress to stderr; repeat for debug output",
    )
    return parser


def use_color(no_color: bool) -> bool:
    if no_color or os.getenv("NO_COLOR") is not None:
        return False
    return sys.stdout.isatty()


def configure_logging(verbosity: int) -> None:
    level: int | str
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = os.getenv("LOG_LEVEL", "WARNING").upper()
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    options = AnalysisOptions(
        top=args.top,
        output_format=args.output_format,
        color=use_color(args.no_color),
    )

    try:
        report = analyze_file(args.file, top=options.top, encoding=args.encoding)
    except TextFrequencyError as exc:
        LOGGER.debug("Aborting: %r", exc)
        click.echo(str(exc), err=True)
        return 1

    click.echo(render(report, options), color=options.color)
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
