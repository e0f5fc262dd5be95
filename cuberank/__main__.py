"""Rank a round from a results sheet file.

Usage:
    python -m cuberank results/3x3-round1.csv
    python -m cuberank results/3x3-final.pdf --format "Best of 3" --json
"""

import argparse
import json
import logging
import os
import sys
from pathlib import Path

from cuberank.analyze import AnalysisError, analyze_round
from cuberank.config import DEFAULT_FORMAT, LOG_LEVEL_ENV_VAR
from cuberank.formats import get_all_formats


def configure_logging(verbose: bool) -> None:
    level = "DEBUG" if verbose else os.environ.get(LOG_LEVEL_ENV_VAR, "WARNING").upper()
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="cuberank",
        description="Rank a cubing round from a CSV, HTML or PDF results sheet.",
    )
    parser.add_argument("file", type=Path, help="Results sheet to rank")
    parser.add_argument(
        "-f", "--format", default=DEFAULT_FORMAT, dest="round_format",
        help=f"Round format (default: {DEFAULT_FORMAT}; "
             f"known: {', '.join(f.name for f in get_all_formats())})",
    )
    parser.add_argument("--json", action="store_true", help="Print the full analysis as JSON")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output")
    args = parser.parse_args(argv)

    configure_logging(args.verbose)

    try:
        content = args.file.read_bytes()
    except OSError as e:
        print(f"Error: could not read {args.file}: {e}", file=sys.stderr)
        return 1

    try:
        analysis = analyze_round(args.file.name, content, args.round_format)
    except AnalysisError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(analysis.to_dict(), indent=2))
    else:
        print(analysis.export)
    return 0


if __name__ == "__main__":
    sys.exit(main())
