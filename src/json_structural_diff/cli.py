"""Command-line entry point: ``json-structural-diff SOURCE TARGET``.

Prints the rendered diff to stdout when the documents differ.  The exit
code tells the three outcomes apart:

- 0: no difference
- 1: difference found
- 2: an input could not be read or parsed
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from enum import IntEnum
from pathlib import Path

from json_structural_diff import __version__
from json_structural_diff.api import diff_files, render
from json_structural_diff.config import RenderOptions
from json_structural_diff.errors import DiffInputError

__all__ = ["ExitCode", "build_parser", "main"]

logger = logging.getLogger(__name__)


class ExitCode(IntEnum):
    """Process exit codes."""

    NO_DIFFERENCE = 0
    DIFFERENCE = 1
    INPUT_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="json-structural-diff",
        description="Create machine-readable JSON diffs",
    )
    parser.add_argument(
        "source",
        type=Path,
        help="Path to the JSON file you wish to compare against",
    )
    parser.add_argument(
        "target",
        type=Path,
        help="Path to the JSON file to be compared",
    )
    parser.add_argument(
        "--compact",
        action="store_true",
        help="print the diff on a single line",
    )
    parser.add_argument(
        "--ascii",
        action="store_true",
        help="escape non-ASCII characters in the output",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="log debug messages to stderr",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI and return its exit code."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        diff = diff_files(args.source, args.target)
    except DiffInputError as exc:
        logger.debug("input error", exc_info=exc)
        print(exc, file=sys.stderr)
        return ExitCode.INPUT_ERROR

    if diff is None:
        logger.debug("no difference between %s and %s", args.source, args.target)
        return ExitCode.NO_DIFFERENCE

    options = RenderOptions(
        indent=None if args.compact else 2,
        ensure_ascii=args.ascii,
    )
    print(render(diff, options))
    return ExitCode.DIFFERENCE


def run() -> None:
    """Console-script wrapper around ``main``."""
    sys.exit(main())


if __name__ == "__main__":
    run()
