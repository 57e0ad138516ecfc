"""Command-line driver: trace two wires from a file and report the nearest crossing."""

import argparse
import logging
import sys
from typing import Optional, TextIO

from crosswire.grid import Grid
from crosswire.instructions import ParseError, parse_instructions
from crosswire.logging_config import DEFAULT_LOG_LEVEL, setup_logging
from crosswire.reducer import is_intersection, manhattan, nearest_intersection
from crosswire.tracer import trace_wires

logger = logging.getLogger(__name__)

EXIT_FILE_ERROR = 1
EXIT_PARSE_ERROR = 2
EXIT_NO_INTERSECTION = 3

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def load_wires(path: str) -> str:
    """Read the whole wire description.

    OSError and UnicodeDecodeError propagate to the caller.
    """
    with open(path, encoding="utf-8") as f:
        return f.read()


def solve_text(text: str) -> Grid:
    """Trace both wires described by ``text`` onto a fresh Grid."""
    return trace_wires(parse_instructions(text))


def solve_file(path: str) -> Optional[int]:
    """Nearest intersection distance for the wires in ``path``, or None."""
    return nearest_intersection(solve_text(load_wires(path)))


def report(grid: Grid, out: Optional[TextIO] = None) -> Optional[int]:
    """Print every intersection and the final distance; return that distance."""
    if out is None:
        out = sys.stdout
    for index, cell in enumerate(grid):
        if not is_intersection(cell):
            continue
        print(f"INTERSECTION #: {index}\tX = {cell.x}\t Y = {cell.y}", file=out)
        print(f"\tINTERSECTION DISTANCE: {manhattan(cell)}", file=out)

    distance = nearest_intersection(grid)
    print(f"FINAL DISTANCE: {'none' if distance is None else distance}", file=out)
    return distance


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="crosswire",
        description="Find the crossing of two grid wires nearest to the origin.",
    )
    parser.add_argument("path", help="file with two lines of comma-separated moves, e.g. R8,U5,L5,D3")
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default=logging.getLevelName(DEFAULT_LOG_LEVEL),
        help="progress logging verbosity (default: %(default)s)",
    )
    parser.add_argument("--log-file", help="also write log records to this file")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    setup_logging(getattr(logging, args.log_level), args.log_file)
    logger.info("solving %s", args.path)

    try:
        text = load_wires(args.path)
    except FileNotFoundError:
        print(f"error: file not found: {args.path}", file=sys.stderr)
        sys.exit(EXIT_FILE_ERROR)
    except (OSError, UnicodeDecodeError) as e:
        print(f"error: cannot read {args.path}: {e}", file=sys.stderr)
        sys.exit(EXIT_FILE_ERROR)

    try:
        grid = solve_text(text)
    except ParseError as e:
        print(f"error: {e}", file=sys.stderr)
        sys.exit(EXIT_PARSE_ERROR)

    distance = report(grid)
    if distance is None:
        print("no intersection found", file=sys.stderr)
        sys.exit(EXIT_NO_INTERSECTION)


if __name__ == "__main__":
    main()
