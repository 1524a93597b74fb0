#!/usr/bin/env python3
"""
knights [OPTIONS] [SEARCHPATH]

Enumerate knight's tours on a grid x grid board, optionally continuing from a
given starting path.
"""
from __future__ import annotations
import argparse, logging, sys
from typing import List, Optional

from knight_tour.config import DEFAULT_GRID, MAX_GRID, MAX_PATH_VALUE, MIN_GRID
from knight_tour.domains.board import coordinate_grid, format_path
from knight_tour.logging_utils import get_logger
from knight_tour.search.backtrack import Solution, initialize
from knight_tour.search.validate import PathError

# process exit codes for bad command lines
EXIT_GRID = -1
EXIT_OPTION = -2
EXIT_TOO_MANY = -3
EXIT_VALUE = -4

HELP_NOTES = f"""
knights [OPTIONS] [SEARCHPATH]

OPTIONS

-v
--verbose\tprint every explored path and the move table
-g=#
--grid=#\tuse grid of size # (default {DEFAULT_GRID} for {DEFAULT_GRID}x{DEFAULT_GRID}). Minimum {MIN_GRID}, Maximum {MAX_GRID}.
-n=#
--max-paths=#\tstop after # paths have been found
--pin\t\tonly search extensions of SEARCHPATH itself
-h
--help\t\tprint this text and the coordinate grid

SEARCHPATH

The optional SEARCHPATH is a sequence of numbers not longer than
grid x grid, each in the range 0 to grid x grid - 1 and non repeating.
Each number in the sequence must be a legal knight's move from the
previous one. The search resumes right after SEARCHPATH, so a prefix of a
known path skips everything enumerated before it.

COORDINATE SYSTEM

The bottom left hand corner is 0 and numbering first goes up and then
wraps to the right. The top left is grid - 1 and the top right square
is grid x grid - 1.
"""


class UsageError(Exception):
    pass


class KnightsArgumentParser(argparse.ArgumentParser):
    """Raises on bad input instead of exiting with argparse's status 2."""

    def error(self, message):
        raise UsageError(message)


def build_parser() -> KnightsArgumentParser:
    ap = KnightsArgumentParser(prog="knights", add_help=False)
    ap.add_argument("-v", "--verbose", action="store_true")
    ap.add_argument("-g", "--grid", type=int, default=DEFAULT_GRID)
    ap.add_argument("-n", "--max-paths", type=int, default=None)
    ap.add_argument("--pin", action="store_true")
    ap.add_argument("-h", "--help", action="store_true")
    ap.add_argument("searchpath", type=int, nargs="*")
    return ap


def check_searchpath(values: List[int], grid: int) -> Optional[int]:
    """Exit code for the first bad SEARCHPATH element, None if all fine."""
    for i, num in enumerate(values):
        if i == grid * grid:
            print(f"\nToo many elements in the SEARCHPATH only permitted {grid * grid}"
                  f" for grid of size {grid}")
            return EXIT_TOO_MANY
        if not 0 <= num <= MAX_PATH_VALUE:
            print(f"\nInput number {num} out of range, negative numbers or those"
                  f" greater than {MAX_PATH_VALUE} not accepted")
            return EXIT_VALUE
    return None


def main(argv: Optional[List[str]] = None) -> int:
    ap = build_parser()
    try:
        args = ap.parse_intermixed_args(argv)
    except UsageError as e:
        print(f"\nillegal option ({e}), try --help for options")
        return EXIT_OPTION

    if args.max_paths is not None and args.max_paths < 1:
        print(f"\nillegal option (--max-paths={args.max_paths} must be at least 1),"
              " try --help for options")
        return EXIT_OPTION

    if not MIN_GRID <= args.grid <= MAX_GRID:
        print(f"\nValue for grid size {args.grid} out of range of {MIN_GRID}-{MAX_GRID}, exiting.")
        return EXIT_GRID

    code = check_searchpath(args.searchpath, args.grid)
    if code is not None:
        return code

    if args.help:
        print(HELP_NOTES)
        print(coordinate_grid(args.grid))
        return 0

    if args.verbose:
        get_logger().setLevel(logging.DEBUG)

    path = args.searchpath or [0]
    on_step = (lambda p: print(format_path(p))) if args.verbose else None
    try:
        engine = initialize(args.grid, path, pinned=args.pin, on_step=on_step)
    except PathError as e:
        print(f"\n{e}")
        return e.code

    print(f"initial stack: {format_path(engine.path())}")
    if args.verbose:
        print("\n".join(engine.table.describe()))

    def report(sol: Solution):
        print()
        print(format_path(sol.path))
        print(f"\npath {sol.index} found after {sol.dead_ends} many dead ends")

    res = engine.run(max_paths=args.max_paths, on_path=report)

    if res["termination"] == "exhausted":
        print(f"\nALL DONE! have exhausted all paths on grid of {args.grid} "
              f"starting with {res['start']}")
        print(f"total paths found {res['paths']} with {res['dead_ends']} dead ends")
    else:
        print(f"\nstopped after {res['paths']} paths with {res['dead_ends']} dead ends")
    return 0


if __name__ == "__main__":
    sys.exit(main())
