#!/usr/bin/env python3
"""
Count the trees hit sliding down a horizontally repeating hillside.
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import dataclass
from enum import Enum
from math import prod
from typing import Iterator, Sequence

from ascii_render import render_map
from grid_map import Map
from grid_parser import enum_converter, enum_to_char
from puzzle_io import configure_logging, load_first_map, run_solver

logger = logging.getLogger(__name__)

__all__ = [
    "Square",
    "Encounters",
    "DEFAULT_SLOPES",
    "trail_positions",
    "trail_for_slope",
    "tree_product",
    "main",
]


class Square(Enum):
    OPEN = "."
    TREE = "#"


@dataclass(frozen=True)
class Encounters:
    """What a single run down the hill bumped into."""

    trees: int = 0
    open: int = 0


# (run, fall) pairs
DEFAULT_SLOPES: tuple[tuple[int, int], ...] = ((1, 1), (3, 1), (5, 1), (7, 1), (1, 2))


def trail_positions(grid: Map, run: int, fall: int) -> Iterator[tuple[int, int]]:
    """Yield each (x, y) visited from the top-left until falling off the bottom.

    x is reported modulo the map width.
    """
    if fall <= 0:
        raise ValueError(f"fall must be positive, got {fall}")

    x, y = 0, 0
    while grid.at(x, y) is not None:
        yield x % grid.width, y
        x += run
        y += fall


def trail_for_slope(grid: Map, run: int, fall: int) -> Encounters:
    trees = 0
    clear = 0
    for x, y in trail_positions(grid, run, fall):
        if grid.at(x, y) is Square.TREE:
            trees += 1
        else:
            clear += 1
    return Encounters(trees=trees, open=clear)


def tree_product(grid: Map, slopes: Sequence[tuple[int, int]] = DEFAULT_SLOPES) -> int:
    return prod(trail_for_slope(grid, run, fall).trees for run, fall in slopes)


def _parse_slope(text: str) -> tuple[int, int]:
    try:
        run, fall = (int(part) for part in text.split(","))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected RUN,FALL but got {text!r}") from None
    if fall <= 0:
        raise argparse.ArgumentTypeError(f"FALL must be positive in {text!r}")
    return run, fall


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("inputs", nargs="+", help="map files; the first that parses is used")
    parser.add_argument(
        "--slope",
        type=_parse_slope,
        action="append",
        metavar="RUN,FALL",
        help="slope to try (repeatable, default: the five standard slopes)",
    )
    parser.add_argument("--show", action="store_true", help="draw the map with the initial trail highlighted")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)
    slopes = tuple(args.slope) if args.slope else DEFAULT_SLOPES

    def solve() -> None:
        grid = load_first_map(args.inputs, enum_converter(Square))

        initial = trail_for_slope(grid, 3, 1)
        print(f"For the initial slope, encountered {initial.trees} trees and {initial.open} open spaces")

        if args.show:
            trail = set(trail_positions(grid, 3, 1))
            print("\n".join(render_map(grid, enum_to_char, "slope 3,1", highlight=trail)))

        for run, fall in slopes:
            encounters = trail_for_slope(grid, run, fall)
            logger.debug("slope (%d,%d): %r", run, fall, encounters)
            print(
                f"For slope ({run},{fall}), encountered {encounters.trees} trees "
                f"and {encounters.open} open spaces"
            )

        print(f"The product of the trees encountered is {tree_product(grid, slopes)}")

    return run_solver(solve)


if __name__ == "__main__":
    sys.exit(main())
